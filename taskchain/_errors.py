from __future__ import annotations


class RetryExhaustedError(Exception):
    """retry() used up max_retries attempts without a fulfilment."""

    attempts_made: int
    cause: BaseException | None

    def __init__(self, attempts_made: int, cause: BaseException | None = None) -> None:
        # Nested retries: keep the root failure, not the inner exhaustion.
        if isinstance(cause, RetryExhaustedError):
            cause = cause.cause
        self.attempts_made = attempts_made
        self.cause = cause
        super().__init__(f"Retries exhausted after {attempts_made} attempts")
        self.__cause__ = cause


__all__ = ("RetryExhaustedError",)
