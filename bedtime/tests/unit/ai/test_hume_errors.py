"""
Hume 에러 디코더 단위 테스트
"""

from bedtime.core.exceptions import ErrorCode
from bedtime.infrastructure.ai.exceptions import (
    DuplicateVoiceNameException,
    ProviderAuthenticationException,
    ProviderRequestException,
)
from bedtime.infrastructure.ai.providers.hume_errors import (
    decode_error,
    is_duplicate_voice_name,
    parse_error_body,
)

DUPLICATE_NAME_BODY = {
    "details": {
        "type": "invalid_request",
        "message": "A voice with this name already exists",
        "code": "E0603",
        "slug": "client_error",
    }
}


class TestIsDuplicateVoiceName:
    def test_matches_code_and_slug(self):
        assert is_duplicate_voice_name(DUPLICATE_NAME_BODY) is True

    def test_other_code(self):
        body = {"details": {**DUPLICATE_NAME_BODY["details"], "code": "E0100"}}
        assert is_duplicate_voice_name(body) is False

    def test_other_slug(self):
        body = {"details": {**DUPLICATE_NAME_BODY["details"], "slug": "server_error"}}
        assert is_duplicate_voice_name(body) is False

    def test_unknown_shapes(self):
        assert is_duplicate_voice_name(None) is False
        assert is_duplicate_voice_name("Bad Request") is False
        assert is_duplicate_voice_name({"message": "nope"}) is False
        assert is_duplicate_voice_name({"details": {"code": "E0603"}}) is False


class TestParseErrorBody:
    def test_parses_known_shape(self):
        parsed = parse_error_body(DUPLICATE_NAME_BODY)
        assert parsed is not None
        assert parsed.details.code == "E0603"

    def test_returns_none_for_unknown(self):
        assert parse_error_body(["not", "a", "dict"]) is None


class TestDecodeError:
    def test_duplicate_name(self):
        exc = decode_error(400, DUPLICATE_NAME_BODY, voice_name="Grandma")

        assert isinstance(exc, DuplicateVoiceNameException)
        assert exc.status_code == 409
        assert exc.error_code == ErrorCode.BIZ_VOICE_NAME_DUPLICATE
        assert exc.details == {"name": "Grandma"}

    def test_unauthorized(self):
        exc = decode_error(401, {"message": "Invalid ApiKey"})
        assert isinstance(exc, ProviderAuthenticationException)

    def test_forbidden(self):
        assert isinstance(decode_error(403, None), ProviderAuthenticationException)

    def test_known_shape_other_code(self):
        body = {"details": {**DUPLICATE_NAME_BODY["details"], "code": "E0100", "message": "Bad text"}}
        exc = decode_error(400, body)

        assert isinstance(exc, ProviderRequestException)
        assert exc.reason == "E0100: Bad text"
        assert exc.details["provider_status"] == 400

    def test_unknown_body(self):
        exc = decode_error(503, None)

        assert isinstance(exc, ProviderRequestException)
        assert exc.reason == "HTTP 503"
        assert exc.status_code == 502
