from .guard import invoke_if, re_reject_if, reject_if, resolve_if
from .recover import alt, alt_with, recover, recover_with
from .retry import (
    DEFAULT_RETRY_POLICY,
    Jitter,
    OnRetry,
    RetryPolicy,
    backoff_delay,
    proportional_jitter,
    retry,
    then_retry,
    uniform_jitter,
)

__all__ = (
    # Guards
    "invoke_if",
    "re_reject_if",
    "reject_if",
    "resolve_if",
    # Recover
    "alt",
    "alt_with",
    "recover",
    "recover_with",
    # Retry
    "DEFAULT_RETRY_POLICY",
    "Jitter",
    "OnRetry",
    "RetryPolicy",
    "backoff_delay",
    "proportional_jitter",
    "retry",
    "then_retry",
    "uniform_jitter",
)
