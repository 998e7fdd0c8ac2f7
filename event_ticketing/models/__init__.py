from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Numeric, String, inspect
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm.attributes import set_committed_value
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

CENTS = Decimal("0.01")


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Money(TypeDecorator):
    """NUMERIC(18, 2) that round-trips Decimal exactly on every backend.

    SQLite keeps NUMERIC as a float, so there the value is stored as text.
    """

    impl = Numeric(18, 2)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(21))
        return dialect.type_descriptor(Numeric(18, 2))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value).quantize(CENTS)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value).quantize(CENTS)


def fill_unloaded(instance, key: str, value) -> None:
    """Give a relationship that was not eager-loaded an empty value instead of raising on access."""
    if key in inspect(instance).unloaded:
        set_committed_value(instance, key, value)
