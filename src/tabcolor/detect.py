"""Terminal and shell detection from the process ancestry."""

import logging
from collections.abc import Iterable

from tabcolor.ancestry import AncestryWalker
from tabcolor.models import DetectionResult, ShellKind, TerminalKind

logger = logging.getLogger(__name__)

# Checked in order; "sh" must stay last since it is the shortest name.
SHELL_CANDIDATES: tuple[tuple[str, ShellKind], ...] = (
    ("zsh", ShellKind.ZSH),
    ("bash", ShellKind.BASH),
    ("fish", ShellKind.FISH),
    ("tcsh", ShellKind.TCSH),
    ("csh", ShellKind.CSH),
    ("ksh", ShellKind.KSH),
    ("sh", ShellKind.SH),
)

# (process name, kind, case sensitive); first match per process wins.
TERMINAL_CANDIDATES: tuple[tuple[str, TerminalKind, bool], ...] = (
    ("sshd", TerminalKind.SSH, True),
    ("tmux", TerminalKind.TMUX, True),
    ("etterminal", TerminalKind.ETTERMINAL, True),
    ("iterm2", TerminalKind.ITERM2, False),
    ("Code Helper", TerminalKind.VSCODE, False),
)


def matches(process_name: str, candidate: str, case_sensitive: bool = True) -> bool:
    """
    Check whether a process name refers to ``candidate``.

    The name matches when it equals the candidate or starts with it followed
    by a space or a colon ("tmux: server"). "mysshd" and "sshdserver" do not
    match "sshd".
    """
    if not case_sensitive:
        process_name = process_name.lower()
        candidate = candidate.lower()

    if process_name == candidate:
        return True
    return process_name.startswith(candidate + " ") or process_name.startswith(candidate + ":")


def match_shell(process_name: str) -> ShellKind:
    for candidate, kind in SHELL_CANDIDATES:
        if matches(process_name, candidate, case_sensitive=True):
            return kind
    return ShellKind.UNKNOWN


def match_terminal(process_name: str) -> TerminalKind:
    for candidate, kind, case_sensitive in TERMINAL_CANDIDATES:
        if matches(process_name, candidate, case_sensitive=case_sensitive):
            return kind
    return TerminalKind.UNKNOWN


def classify(chain: Iterable[str], terminal_override: str | None = None) -> DetectionResult:
    """
    Classify an ancestor chain into terminals and a shell.

    Every terminal found is kept, in chain order. Only the first shell is
    kept. ``valid`` records whether that shell came before any terminal, or
    was found with no terminal at all; it does not affect resolution.

    Args:
        chain: Process names, nearest ancestor first.
        terminal_override: Terminal name to try before anything detected.
            Empty or unrecognised names are ignored.
    """
    shell = ShellKind.UNKNOWN
    shell_first = False
    terminals: list[TerminalKind] = []

    for name in chain:
        if shell is ShellKind.UNKNOWN:
            shell = match_shell(name)
            if shell is not ShellKind.UNKNOWN:
                shell_first = not terminals

        terminal = match_terminal(name)
        if terminal is not TerminalKind.UNKNOWN:
            terminals.append(terminal)

    valid = shell_first or (shell is not ShellKind.UNKNOWN and not terminals)

    if terminal_override:
        override = TerminalKind.parse(terminal_override)
        if override is None:
            logger.debug(f"Ignoring unknown terminal override: {terminal_override!r}")
        else:
            terminals.insert(0, override)

    return DetectionResult(terminals=tuple(terminals), shell=shell, valid=valid)


def in_ancestry(
    walker: AncestryWalker,
    candidate: str,
    case_sensitive: bool | None = None,
) -> bool:
    """
    Check whether any process from the current one up to init is ``candidate``.

    Matching is case-insensitive for "iterm" and "iterm2" unless
    ``case_sensitive`` says otherwise.
    """
    if case_sensitive is None:
        case_sensitive = candidate.lower() not in ("iterm", "iterm2")
    return any(matches(name, candidate, case_sensitive) for name in walker.describe())


class TerminalShellDetector:
    """Runs one ancestry walk and classifies it."""

    def __init__(self, walker: AncestryWalker | None = None) -> None:
        self._walker = walker if walker is not None else AncestryWalker()

    @property
    def walker(self) -> AncestryWalker:
        return self._walker

    def detect(self, terminal_override: str | None = None) -> DetectionResult:
        chain = self._walker.walk()
        if not chain.complete:
            logger.debug(f"Process ancestry is incomplete ({len(chain)} entries)")

        result = classify(chain, terminal_override)
        logger.debug(f"Process ancestor chain: {list(chain.names)}")
        logger.debug(f"Terminal detection: {[str(t) for t in result.terminals]}")
        logger.debug(f"Shell detection: {result.shell}")
        logger.debug(
            f"Detection valid: {result.valid}"
            + ("" if result.valid else " (shell should come before terminal)")
        )
        return result
