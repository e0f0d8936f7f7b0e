"""Shared fixtures for tabcolor tests."""

import pytest

from tabcolor.ancestry import AncestryLookupError, AncestryWalker


class FakeAncestrySource:
    """In-memory process table: pid -> (name, parent pid).

    Pids in ``broken_parents`` have a readable name but no readable parent.
    """

    def __init__(
        self,
        table: dict[int, tuple[str, int]],
        current: int,
        broken_parents: set[int] | None = None,
    ) -> None:
        self.table = table
        self.current = current
        self.broken_parents = broken_parents or set()
        self.lookups: list[int] = []

    def current_pid(self) -> int:
        return self.current

    def name(self, pid: int) -> str:
        self.lookups.append(pid)
        if pid not in self.table:
            raise AncestryLookupError(f"no such pid {pid}")
        return self.table[pid][0]

    def parent_pid(self, pid: int) -> int:
        self.lookups.append(pid)
        if pid not in self.table or pid in self.broken_parents:
            raise AncestryLookupError(f"no such pid {pid}")
        return self.table[pid][1]


def chain_table(*names: str, current: str = "tabcolor") -> tuple[dict[int, tuple[str, int]], int]:
    """Build a linear process table; ``names`` are ancestors, nearest first."""
    pids = list(range(100, 100 + len(names) + 1))
    table: dict[int, tuple[str, int]] = {}
    all_names = (current, *names)
    for i, name in enumerate(all_names):
        parent = pids[i + 1] if i + 1 < len(pids) else 1
        table[pids[i]] = (name, parent)
    return table, pids[0]


@pytest.fixture
def make_walker():
    """Return a factory building an AncestryWalker over a fake linear chain."""

    def factory(*names: str) -> AncestryWalker:
        table, current = chain_table(*names)
        return AncestryWalker(FakeAncestrySource(table, current))

    return factory
