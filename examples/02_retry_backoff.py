from __future__ import annotations

from _infra import Failure, FakeBackend, banner, run

from taskchain import RetryExhaustedError, RetryPolicy, proportional_jitter, retry


async def main() -> None:
    banner("02_retry_backoff: exponential backoff with jitter")

    api = FakeBackend(name="flaky", delay_seconds=0.005, failures_before_ok=10)

    def report(attempt: int, delay: float, error: BaseException) -> None:
        print(f"attempt #{attempt} failed ({error}), next try in {delay:.3f}s")

    policy = RetryPolicy(
        max_retries=4,
        initial_interval=0.01,
        backoff_rate=2.0,
        on_retry=report,
        should_retry=lambda e: isinstance(e, Failure) and e.transient,
        jitter=proportional_jitter(0.2),
    )

    try:
        await retry(lambda: api.fetch_user(7), policy)
    except RetryExhaustedError as exc:
        print(f"{exc}; last error: {exc.cause!r}")


if __name__ == "__main__":
    run(main)
