from __future__ import annotations

from _infra import Failure, FakeBackend, User, banner, run

from taskchain import bind, partition, recover_with, reject_if, resolve_if


async def main() -> None:
    banner("03_partition_guards: split outcomes, recover selectively")

    backends = [
        FakeBackend(name="eu"),
        FakeBackend(name="us", failures_before_ok=1, failure_transient=False),
        FakeBackend(name="asia", delay_seconds=0.01),
    ]
    no_bots = reject_if(
        lambda user: user.name.startswith("bot"),
        lambda user: Failure(f"{user.id} is a bot"),
    )
    guest = resolve_if(
        lambda e: isinstance(e, Failure) and not e.transient,
        lambda e: User(id=0, name="guest"),
    )

    faulted, fulfilled = await partition([bind(b.fetch_user(1), no_bots) for b in backends])
    print(f"fulfilled: {[u.name for u in fulfilled]}")
    print(f"faulted:   {[str(e) for e in faulted]}")

    down = FakeBackend(name="down", failures_before_ok=1, failure_transient=False)
    user = await recover_with(down.fetch_user(1), guest)
    print(f"fallback user: {user.name}")


if __name__ == "__main__":
    run(main)
