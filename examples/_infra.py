"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field


# Types
@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class NotFound(Exception):
    entity: str
    id: int | str

    def __str__(self) -> str:
        return f"{self.entity}:{self.id} not found"


# Fake DB
@dataclass(slots=True)
class FakeDb:
    users: dict[int, User] = field(default_factory=lambda: {
        42: User(42, "Ada", "ada@example.com"),
        43: User(43, "Grace", "grace@example.com"),
    })
    queries: int = 0

    def get_user(self, user_id: int) -> User:
        self.queries += 1
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    async def fetch_user(self, user_id: int) -> User:
        await asyncio.sleep(0.01)
        return self.get_user(user_id)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(level=logging.DEBUG, format="  [%(name)s] %(message)s")
    asyncio.run(main())
