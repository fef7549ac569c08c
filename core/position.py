"""Workspace index arithmetic."""

from __future__ import annotations

from executor.command_executor import QueryError


def resolve(total: int, current: int, offset: int) -> int:
    """Return the workspace reached by moving `offset` steps from `current`.

    Movement wraps around in both directions. A non-positive `total` means the
    workspace count query returned garbage and is reported as a query failure.
    """
    if total <= 0:
        raise QueryError("couldn't get number of workspaces")
    target = current + offset
    while target < 0:
        target += total
    return target % total
