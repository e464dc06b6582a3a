from __future__ import annotations

from _infra import Failure, FakeBackend, FakeCache, banner, run

from taskchain import flow


async def main() -> None:
    banner("01_quickstart: flow + filter + retry + fallback")

    api = FakeBackend(
        name="api",
        delay_seconds=0.01,
        failures_before_ok=2,
        failure_transient=True,
    )
    cache = FakeCache()

    # Cache miss falls back to the user id; api fails twice, the third call succeeds.
    message = await (
        flow(cache.get_user(42))
        .fmap(lambda user: user.id)
        .recover(lambda _: 42)
        .retry(
            api.fetch_user,
            max_retries=3,
            initial_interval=0.01,
            should_retry=lambda e: isinstance(e, Failure) and e.transient,
        )
        .if_fulfilled(cache.put_user)
        .filter_or(lambda user: user.is_active, morphism=lambda user: Failure(f"{user.id} inactive"))
        .then(lambda user: f"hello, {user.name}", lambda exc: f"error: {exc!r}")
    )
    print(message)
    print(f"api calls: {api.calls}, cached: {sorted(cache.users)}")


if __name__ == "__main__":
    run(main)
