from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

from order_desk.domain.errors import OrderDeskError, StoreError

P = ParamSpec("P")
R = TypeVar("R")


def store_errors(message: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Turn any failure inside a store call into an opaque ``StoreError``.

    The original exception is logged once, with traceback, under the
    decorated function's qualified name and chained as ``__cause__``; the
    raised ``StoreError`` only carries ``message``. Errors the service raises
    on purpose (``OrderDeskError``) pass through untouched.

    Usage::

        @store_errors("Error adding new order")
        def _insert(self, order: Order) -> Order: ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except OrderDeskError:
                raise
            except Exception as exc:
                logger.opt(exception=exc).error(
                    f"[{func.__qualname__}] {message}: {type(exc).__name__}"
                )
                raise StoreError(message) from exc

        return wrapper

    return decorator
