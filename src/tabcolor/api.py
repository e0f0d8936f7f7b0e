"""One-shot entry points: load, detect, resolve."""

import logging
from dataclasses import replace
from pathlib import Path

from tabcolor.config import load_store
from tabcolor.detect import TerminalShellDetector
from tabcolor.models import DetectionResult, Profile, ProfileStore, TerminalKind
from tabcolor.profiles import resolve

logger = logging.getLogger(__name__)


def resolve_profile(
    name: str,
    terminal_override: str | None = None,
    *,
    store: ProfileStore | None = None,
    detector: TerminalShellDetector | None = None,
    detection: DetectionResult | None = None,
    config_path: Path | None = None,
) -> Profile:
    """
    Resolve ``name`` for the environment this process runs in.

    Args:
        name: Profile name from the configuration.
        terminal_override: Terminal to prefer over detected ones.
        store: Profiles to use instead of loading the config file.
        detector: Detector to use instead of the psutil-backed default.
        detection: Ready-made detection; skips the ancestry walk. A valid
            ``terminal_override`` is still put in front of its terminals.
        config_path: Config file to load when ``store`` is not given.
    """
    if store is None:
        store = load_store(config_path)
    if detection is None:
        detection = (detector or TerminalShellDetector()).detect(terminal_override)
    elif terminal_override:
        override = TerminalKind.parse(terminal_override)
        if override is None:
            logger.debug(f"Ignoring unknown terminal override: {terminal_override!r}")
        else:
            detection = replace(detection, terminals=(override, *detection.terminals))
    return resolve(store, name, detection)


def list_profiles(config_path: Path | None = None) -> list[str]:
    """Names of all configured profiles, in file order."""
    return load_store(config_path).names()
