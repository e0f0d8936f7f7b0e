"""Process ancestry lookup for tabcolor."""

import logging
import os
from typing import Protocol

import psutil

from tabcolor.models import AncestorChain, ProcessDescriptor

logger = logging.getLogger(__name__)


class AncestryLookupError(Exception):
    """A process could not be looked up. Ends a walk, never escapes it."""


class ProcessAncestrySource(Protocol):
    """Read access to the OS process table."""

    def current_pid(self) -> int: ...

    def name(self, pid: int) -> str: ...

    def parent_pid(self, pid: int) -> int: ...


class PsutilAncestrySource:
    """
    Process table access backed by psutil.

    NoSuchProcess, AccessDenied and ZombieProcess are reported as
    AncestryLookupError so the walker can end the chain there.
    """

    def current_pid(self) -> int:
        return os.getpid()

    def name(self, pid: int) -> str:
        try:
            return psutil.Process(pid).name()
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess) as e:
            raise AncestryLookupError(f"cannot read name of pid {pid}: {e}") from e

    def parent_pid(self, pid: int) -> int:
        try:
            return psutil.Process(pid).ppid()
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess) as e:
            raise AncestryLookupError(f"cannot read parent of pid {pid}: {e}") from e


class AncestryWalker:
    """Walks the parent chain of a process up to init."""

    def __init__(self, source: ProcessAncestrySource | None = None) -> None:
        """
        Initialize the AncestryWalker.

        Args:
            source: Process table to query. Defaults to psutil.
        """
        self._source = source if source is not None else PsutilAncestrySource()

    @property
    def source(self) -> ProcessAncestrySource:
        return self._source

    def walk(self, start_pid: int | None = None) -> AncestorChain:
        """
        Collect the ancestors of ``start_pid``, nearest first.

        The start process itself is not part of the chain. The walk stops
        when the parent pid is 1 or lower, or when a lookup fails; in the
        latter case the partial chain is returned with ``complete=False``.

        Args:
            start_pid: Process to start from. Defaults to the current process.
        """
        pid = self._source.current_pid() if start_pid is None else start_pid
        processes: list[ProcessDescriptor] = []

        try:
            parent = self._source.parent_pid(pid)
        except AncestryLookupError as e:
            logger.debug(f"Ancestry walk ended at start: {e}")
            return AncestorChain(processes=(), complete=False)

        while parent > 1:
            try:
                name = self._source.name(parent)
            except AncestryLookupError as e:
                logger.debug(f"Ancestry walk ended early: {e}")
                return AncestorChain(processes=tuple(processes), complete=False)

            try:
                grandparent = self._source.parent_pid(parent)
            except AncestryLookupError as e:
                # 0 stands for "unknown parent"; the chain ends here
                logger.debug(f"Ancestry walk ended early: {e}")
                processes.append(ProcessDescriptor(pid=parent, name=name, parent_pid=0))
                return AncestorChain(processes=tuple(processes), complete=False)

            processes.append(ProcessDescriptor(pid=parent, name=name, parent_pid=grandparent))
            parent = grandparent

        return AncestorChain(processes=tuple(processes), complete=True)

    def describe(self, start_pid: int | None = None) -> AncestorChain:
        """Like walk(), but with the start process itself as the first entry."""
        pid = self._source.current_pid() if start_pid is None else start_pid

        try:
            own = ProcessDescriptor(
                pid=pid,
                name=self._source.name(pid),
                parent_pid=self._source.parent_pid(pid),
            )
        except AncestryLookupError as e:
            logger.debug(f"Cannot describe pid {pid}: {e}")
            return AncestorChain(processes=(), complete=False)

        rest = self.walk(pid)
        return AncestorChain(processes=(own, *rest.processes), complete=rest.complete)
