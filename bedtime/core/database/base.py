"""
Database Base Class
모든 ORM 모델의 베이스 클래스
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# 마이그레이션에서 제약조건 이름이 DB마다 동일하도록 고정
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    SQLAlchemy Base Class

    모든 ORM 모델은 이 클래스를 상속받아야 함
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
