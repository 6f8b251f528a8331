"""
Store error classification

Driver exceptions are translated into a small taxonomy so handlers can log
and count failures by kind while still answering callers with a generic
message.
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import exc as sa_exc


class StoreError(Exception):
    """Base exception for persistence failures"""
    kind = "store_error"


class StoreUnavailableError(StoreError):
    """Database can't be reached or the pool is exhausted"""
    kind = "store_unavailable"


class StoreIntegrityError(StoreError):
    """A constraint (e.g. unique email) rejected the write"""
    kind = "store_integrity"


class SerializationError(StoreError):
    """A value couldn't be converted to or from its column type"""
    kind = "serialization_error"


def classify_store_error(error: Exception) -> StoreError:
    """Map a SQLAlchemy exception onto the store error taxonomy"""
    if isinstance(error, (sa_exc.OperationalError, sa_exc.InterfaceError,
                          sa_exc.DisconnectionError, sa_exc.TimeoutError)):
        return StoreUnavailableError(str(error))
    if isinstance(error, sa_exc.IntegrityError):
        return StoreIntegrityError(str(error))
    if isinstance(error, (sa_exc.DataError, sa_exc.StatementError)):
        return SerializationError(str(error))
    return StoreError(str(error))


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """
    Re-raise SQLAlchemy errors as StoreError subclasses.

    Usage:
        with translate_store_errors():
            await db.commit()
    """
    try:
        yield
    except sa_exc.SQLAlchemyError as e:
        raise classify_store_error(e) from e
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
