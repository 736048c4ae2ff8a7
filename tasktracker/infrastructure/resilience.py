# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bounded store access: transient failures become ``UnavailableError``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, TypeVar

from sqlalchemy.exc import DisconnectionError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tasktracker.shared.config import ResilienceConfig
from tasktracker.shared.errors import UnavailableError
from tasktracker.shared.logging import logger

T = TypeVar("T")

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    OperationalError,
    PoolTimeoutError,
    DisconnectionError,
)


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    max_retries: int = 2
    backoff_base: float = 0.1
    backoff_cap: float = 2.0

    @classmethod
    def from_config(cls, config: ResilienceConfig) -> RetryPolicy:
        return cls(
            max_retries=config.max_retries,
            backoff_base=config.backoff_base,
            backoff_cap=config.backoff_cap,
        )



def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        f"store: transient failure ({type(exc).__name__}), "
        f"retrying attempt={state.attempt_number + 1}"
    )


def store_operation(*, idempotent: bool = False) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Wrap a repository method so store failures never hang or leak driver errors.

    Idempotent operations are retried with exponential backoff using the
    repository's ``_retry_policy``; others run exactly once. Either way a
    transient failure that outlives the attempts is raised as
    :class:`UnavailableError`.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(self, *args: Any, **kwargs: Any) -> T:
            policy: RetryPolicy = getattr(self, "_retry_policy", None) or RetryPolicy()
            attempts = policy.max_retries + 1 if idempotent else 1
            retrying = Retrying(
                stop=stop_after_attempt(attempts),
                wait=wait_exponential(multiplier=policy.backoff_base, max=policy.backoff_cap),
                retry=retry_if_exception_type(TRANSIENT_ERRORS),
                before_sleep=_log_retry,
                reraise=True,
            )
            try:
                for attempt in retrying:
                    with attempt:
                        return func(self, *args, **kwargs)
            except TRANSIENT_ERRORS as exc:
                logger.error(f"store: {func.__qualname__} unavailable ({type(exc).__name__})")
                raise UnavailableError() from exc
            raise RuntimeError("resilience: reached unexpected branch")

        return wrapper

    return decorator


__all__ = ["RetryPolicy", "TRANSIENT_ERRORS", "store_operation"]
