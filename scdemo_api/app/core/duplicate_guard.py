"""
Duplicate-execution guard backed by Redis.

Decorate an ``async`` function or method with
:func:`prevent_duplicate_execution` to reject calls that repeat a call
still in flight.  A lock key is derived from the function and from
selected string fields of its parameter object, then claimed with
``SET key LOCKED NX EX ttl``.  If the key already exists the call is
rejected with :class:`DuplicateExecutionError`; otherwise the function
runs and the key is deleted afterwards, whether the call succeeded or
raised.  The TTL bounds how long a crashed holder can block others.

Key layout::

    execution:lock:<Owner>:<function>[:<value1>:<value2>...]

``Owner`` is the enclosing class of a method, or the last segment of
the module name for a module-level function (e.g. the ``orders``
endpoint module).  Field values are appended in the order given by
``keys``; ``None`` contributes the literal ``null``.

Example::

    class OrderService:
        @classmethod
        @prevent_duplicate_execution(keys=("user_id", "order_id"), ttl=10)
        async def create_order(cls, request: OrderRequest) -> str:
            ...
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Iterable, Mapping as MappingType, Sequence, TypeVar

from scdemo_api.app.core.exceptions import DuplicateExecutionError
from scdemo_api.app.core.redis_client import get_redis

logger = logging.getLogger(__name__)

LOCK_KEY_PREFIX = "execution:lock:"
LOCK_VALUE = "LOCKED"
KEY_SEPARATOR = ":"
NULL_VALUE = "null"
DEFAULT_MESSAGE = "This request is already being processed. Please try again shortly."

_BOUND_NAMES = {"self", "cls"}

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def prevent_duplicate_execution(
    keys: Sequence[str] = (),
    ttl: int = 5,
    message: str = DEFAULT_MESSAGE,
    use_method_name: bool = False,
) -> Callable[[F], F]:
    """Reject concurrent duplicates of the decorated coroutine function.

    Parameters
    ----------
    keys : Sequence[str]
        Names of string fields of the parameter object (the first
        argument other than ``self``/``cls``) that identify a call.
    ttl : int
        Lifetime of the lock in seconds.
    message : str
        Message carried by the ``DuplicateExecutionError`` raised on a
        rejected call.
    use_method_name : bool
        Key on the function alone and ignore the arguments.
    """
    field_names = tuple(keys)

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"{func.__qualname__} must be an async function to be guarded")
        signature = inspect.signature(func)
        base_key = f"{LOCK_KEY_PREFIX}{_owner_name(func)}{KEY_SEPARATOR}{func.__name__}"

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            if use_method_name:
                lock_key = base_key
            else:
                param = _parameter_object(func, signature, args, kwargs)
                lock_key = build_lock_key(base_key, param, field_names)

            logger.debug("Checking duplicate execution for lockKey: %s", lock_key)
            redis = get_redis()
            acquired = await redis.set(lock_key, LOCK_VALUE, nx=True, ex=ttl)
            if not acquired:
                logger.warning("Duplicate execution detected for lockKey: %s", lock_key)
                raise DuplicateExecutionError(message, lock_key)

            try:
                logger.debug("Executing method with lockKey: %s", lock_key)
                return await func(*args, **kwargs)
            finally:
                await redis.delete(lock_key)
                logger.debug("Released lock for lockKey: %s", lock_key)

        return wrapper  # type: ignore[return-value]

    return decorator


def build_lock_key(base_key: str, param: Any, field_names: Iterable[str]) -> str:
    """Append the values of ``field_names`` read from ``param`` to ``base_key``."""
    parts = [base_key]
    for field_name in field_names:
        parts.append(extract_field_value(param, field_name))
    return KEY_SEPARATOR.join(parts)


def extract_field_value(param: Any, field_name: str) -> str:
    """Read a string field from an object or mapping.

    Raises ``ValueError`` when the field does not exist and
    ``TypeError`` when its value is neither a string nor ``None``.
    """
    type_name = type(param).__name__
    if isinstance(param, Mapping):
        if field_name not in param:
            raise ValueError(f"Field '{field_name}' not found in {type_name}")
        value = param[field_name]
    else:
        try:
            value = getattr(param, field_name)
        except AttributeError:
            raise ValueError(f"Field '{field_name}' not found in {type_name}") from None

    if value is None:
        return NULL_VALUE
    if not isinstance(value, str):
        raise TypeError(
            f"Field '{field_name}' in {type_name} must be of type str, but was {type(value).__name__}"
        )
    return value


def _owner_name(func: Callable[..., Any]) -> str:
    parts = [part for part in func.__qualname__.split(".") if part != "<locals>"]
    if len(parts) > 1:
        return parts[-2]
    return func.__module__.rsplit(".", 1)[-1]


def _parameter_object(
    func: Callable[..., Any],
    signature: inspect.Signature,
    args: Sequence[Any],
    kwargs: MappingType[str, Any],
) -> Any:
    bound = signature.bind_partial(*args, **kwargs)
    for name, value in bound.arguments.items():
        if name in _BOUND_NAMES:
            continue
        return value
    raise ValueError(f"{func.__qualname__} has no parameter to derive a lock key from")
