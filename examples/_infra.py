from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Failure(Exception):
    def __init__(self, message: str, *, transient: bool = False) -> None:
        super().__init__(message)
        self.transient = transient


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeBackend:
    name: str
    delay_seconds: float = 0.0
    failures_before_ok: int = 0
    failure_transient: bool = True
    calls: int = 0

    async def fetch_user(self, user_id: int) -> User:
        self.calls += 1
        await asyncio.sleep(self.delay_seconds)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise Failure(f"{self.name}: unavailable", transient=self.failure_transient)
        return User(id=user_id, name=f"user:{user_id}@{self.name}")


@dataclass(slots=True)
class FakeCache:
    users: dict[int, User] = field(default_factory=_empty_users)
    delay_seconds: float = 0.0

    async def get_user(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        user = self.users.get(user_id)
        if user is None:
            raise Failure("cache: miss")
        return user

    async def put_user(self, user: User) -> None:
        self.users[user.id] = user


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )
    asyncio.run(main())
