"""Data models for tabcolor."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class TerminalKind(Enum):
    """Terminal emulators and multiplexers recognised in the process chain."""

    UNKNOWN = "unknown"
    ITERM2 = "iterm2"
    ETTERMINAL = "etterminal"
    SSH = "ssh"
    TMUX = "tmux"
    VSCODE = "vscode"

    @classmethod
    def parse(cls, text: str | None) -> "TerminalKind | None":
        """Return the kind named by ``text``, or None if it names no real terminal."""
        if not text:
            return None
        try:
            kind = cls(text.strip().lower())
        except ValueError:
            return None
        return None if kind is cls.UNKNOWN else kind

    def __str__(self) -> str:
        return self.value


class ShellKind(Enum):
    """Interactive shells recognised in the process chain."""

    UNKNOWN = "unknown"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    TCSH = "tcsh"
    CSH = "csh"
    KSH = "ksh"
    SH = "sh"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class ProcessDescriptor:
    """Point-in-time view of a single process in the ancestry."""

    pid: int
    name: str
    parent_pid: int


@dataclass(slots=True, frozen=True)
class AncestorChain:
    """
    Ancestor processes of the running program, nearest first.

    ``complete`` is False when the walk ended because a process lookup
    failed rather than because it reached the root of the tree.
    """

    processes: tuple[ProcessDescriptor, ...] = ()
    complete: bool = True

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(proc.name for proc in self.processes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.processes)


@dataclass(slots=True, frozen=True)
class DetectionResult:
    """Terminals and shell found around the running program."""

    terminals: tuple[TerminalKind, ...] = ()
    shell: ShellKind = ShellKind.UNKNOWN
    valid: bool = False  # shell seen before any terminal; diagnostic only


@dataclass(slots=True, frozen=True)
class Profile:
    """Sparse color settings. Unset fields leave the terminal unchanged."""

    tab: str | None = None
    foreground: str | None = None
    background: str | None = None
    preset: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.tab or self.foreground or self.background or self.preset)

    def overlay(self, other: "Profile") -> "Profile":
        """Return a profile taking every non-empty field of ``other`` over this one."""
        return Profile(
            tab=other.tab or self.tab,
            foreground=other.foreground or self.foreground,
            background=other.background or self.background,
            preset=other.preset or self.preset,
        )

    def describe(self) -> str:
        return (
            f"tab={self.tab or ''!r}, fg={self.foreground or ''!r}, "
            f"bg={self.background or ''!r}, preset={self.preset or ''!r}"
        )


@dataclass(slots=True, frozen=True)
class ProfileNode:
    """A profile together with its named sub-profiles."""

    profile: Profile = field(default_factory=Profile)
    children: Mapping[str, "ProfileNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def child(self, key: str) -> "ProfileNode | None":
        return self.children.get(key)


@dataclass(slots=True, frozen=True)
class ProfileStore:
    """
    Profiles loaded from configuration, keyed by name.

    A value of None marks an entry that exists but is not a profile.
    """

    profiles: Mapping[str, ProfileNode | None] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def names(self) -> list[str]:
        return list(self.profiles)

    def __contains__(self, name: object) -> bool:
        return name in self.profiles
