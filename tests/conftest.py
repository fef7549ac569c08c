"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class FakeQuery:
    """Replays scripted query responses in order and records descriptors."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[str] = []

    def _next(self, descriptor: str) -> Any:
        self.calls.append(descriptor)
        if not self.responses:
            raise AssertionError(f"unexpected query: {descriptor}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def query_int(self, descriptor: str) -> int:
        return int(self._next(descriptor))

    def query_list(self, descriptor: str) -> list[str]:
        return list(self._next(descriptor))


@pytest.fixture
def fake_query() -> Callable[..., FakeQuery]:
    return FakeQuery
