"""
S3 Storage Service

버킷은 private로 두고 get_url()은 Pre-signed URL을 돌려준다.
boto3 호출은 블로킹이므로 asyncio.to_thread로 이벤트 루프 밖에서 실행한다.
"""

import asyncio
import logging
import mimetypes
from typing import BinaryIO, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ...core.config import settings
from .base import AbstractStorageService

logger = logging.getLogger(__name__)

_MISSING_KEY_CODES = ("NoSuchKey", "404", "NotFound")


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")


class S3StorageService(AbstractStorageService):
    def __init__(self, s3_client=None):
        self.bucket_name = settings.aws_s3_bucket_name
        self.url_expiration = settings.aws_s3_presigned_url_expiration
        self.s3_client = s3_client or boto3.client(
            "s3",
            region_name=settings.aws_s3_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            config=Config(signature_version="s3v4", retries={"max_attempts": 3}),
        )

    async def save(
        self,
        file_data: Union[bytes, BinaryIO],
        path: str,
        content_type: Optional[str] = None,
    ) -> str:
        """업로드 후 S3 키를 반환 (URL 아님). ClientError는 전파한다."""
        key = path.lstrip("/")
        content_type = (
            content_type or mimetypes.guess_type(key)[0] or "application/octet-stream"
        )

        try:
            if isinstance(file_data, bytes):
                await asyncio.to_thread(
                    self.s3_client.put_object,
                    Bucket=self.bucket_name,
                    Key=key,
                    Body=file_data,
                    ContentType=content_type,
                )
            else:
                await asyncio.to_thread(
                    self.s3_client.upload_fileobj,
                    file_data,
                    self.bucket_name,
                    key,
                    ExtraArgs={"ContentType": content_type},
                )
        except ClientError as e:
            logger.error(
                "S3 upload failed",
                extra={"key": key, "s3_error": _error_code(e)},
            )
            raise

        return key

    async def get(self, path: str) -> bytes:
        key = path.lstrip("/")
        try:
            response = await asyncio.to_thread(
                self.s3_client.get_object, Bucket=self.bucket_name, Key=key
            )
        except ClientError as e:
            if _error_code(e) in _MISSING_KEY_CODES:
                raise FileNotFoundError(f"File not found in S3: {path}") from e
            raise
        return await asyncio.to_thread(response["Body"].read)

    async def delete(self, path: str) -> bool:
        """DeleteObject는 없는 키에도 성공하므로 항상 True"""
        key = path.lstrip("/")
        try:
            await asyncio.to_thread(
                self.s3_client.delete_object, Bucket=self.bucket_name, Key=key
            )
        except ClientError as e:
            logger.error(
                "S3 delete failed",
                extra={"key": key, "s3_error": _error_code(e)},
            )
            raise
        return True

    async def exists(self, path: str) -> bool:
        try:
            await asyncio.to_thread(
                self.s3_client.head_object, Bucket=self.bucket_name, Key=path.lstrip("/")
            )
        except ClientError as e:
            if _error_code(e) in _MISSING_KEY_CODES:
                return False
            raise
        return True

    def get_url(self, path: Optional[str], expires_in: Optional[int] = None) -> Optional[str]:
        """Pre-signed GET URL. 서명 실패 시 None (응답의 audio_url이 비어 보인다)"""
        if not path:
            return None

        try:
            return self.s3_client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket_name, "Key": path.lstrip("/")},
                ExpiresIn=expires_in or self.url_expiration,
            )
        except ClientError as e:
            logger.error(
                "Pre-signed URL generation failed",
                extra={"key": path, "s3_error": _error_code(e)},
            )
            return None
