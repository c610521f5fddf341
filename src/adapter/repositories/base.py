import functools

from sqlalchemy.exc import SQLAlchemyError

from src.domain.errors import StoreError


def translate_store_errors(func):
    """Re-raise SQLAlchemy failures of a repository method as StoreError."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            raise StoreError(
                str(exc), operation=f"{type(self).__name__}.{func.__name__}"
            ) from exc

    return wrapper
