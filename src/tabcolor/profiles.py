"""Profile store construction and layered profile resolution."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from tabcolor.errors import InvalidProfile, ProfileNotFound
from tabcolor.models import DetectionResult, Profile, ProfileNode, ProfileStore, ShellKind

logger = logging.getLogger(__name__)

# Config key -> Profile attribute
PROFILE_FIELDS = {
    "tab": "tab",
    "fg": "foreground",
    "bg": "background",
    "preset": "preset",
}


def is_profile_table(value: Any) -> bool:
    """A table is a profile fragment if it has at least one color/preset key."""
    return isinstance(value, Mapping) and any(key in value for key in PROFILE_FIELDS)


def _profile_from_table(table: Mapping[str, Any]) -> Profile:
    values = {}
    for key, attr in PROFILE_FIELDS.items():
        value = table.get(key)
        if isinstance(value, str):
            values[attr] = value
        elif value is not None:
            logger.warning(f"Ignoring non-string value for {key!r}: {value!r}")
    return Profile(**values)


def _build_node(table: Mapping[str, Any], path: str) -> ProfileNode:
    children: dict[str, ProfileNode] = {}
    for key, value in table.items():
        if key in PROFILE_FIELDS:
            continue
        if is_profile_table(value):
            children[key] = _build_node(value, f"{path}.{key}")
        else:
            logger.debug(f"Skipping {path}.{key}: not a profile")
    return ProfileNode(
        profile=_profile_from_table(table),
        children=MappingProxyType(children),
    )


def build_store(profiles: Mapping[str, Any] | None) -> ProfileStore:
    """
    Build a ProfileStore from the parsed ``profiles`` table.

    Top-level entries that are neither a profile nor a table holding
    sub-profiles are kept as None, so that resolving them reports
    InvalidProfile rather than ProfileNotFound.
    """
    store: dict[str, ProfileNode | None] = {}
    for name, value in (profiles or {}).items():
        if is_profile_table(value) or (
            isinstance(value, Mapping) and any(is_profile_table(v) for v in value.values())
        ):
            store[name] = _build_node(value, name)
        else:
            logger.warning(f"Profile {name!r} is not a valid profile")
            store[name] = None
    return ProfileStore(profiles=MappingProxyType(store))


def resolve(store: ProfileStore, name: str, detection: DetectionResult) -> Profile:
    """
    Compute the effective profile for ``name`` in the detected environment.

    Layers, later wins: the base profile, the sub-profile for the detected
    shell, then the sub-profile of the first terminal in
    ``detection.terminals`` that has one. Only one terminal sub-profile is
    ever applied.

    Raises:
        ProfileNotFound: ``name`` is not in the store.
        InvalidProfile: the entry for ``name`` is not a profile.
    """
    if name not in store:
        raise ProfileNotFound(name)
    node = store.profiles[name]
    if node is None:
        raise InvalidProfile(name)

    result = node.profile
    logger.debug(f"Using base profile {name!r}: {result.describe()}")

    if detection.shell is not ShellKind.UNKNOWN:
        key = detection.shell.value
        shell_node = node.child(key)
        if shell_node is not None:
            logger.debug(f"Applying shell sub-profile {name}.{key}: {shell_node.profile.describe()}")
            result = result.overlay(shell_node.profile)
        else:
            logger.debug(f"No shell sub-profile found for {name}.{key}")

    for terminal in detection.terminals:
        key = terminal.value
        terminal_node = node.child(key)
        if terminal_node is None:
            logger.debug(f"No terminal sub-profile found for {name}.{key}")
            continue
        logger.debug(
            f"Applying terminal sub-profile {name}.{key}: {terminal_node.profile.describe()}"
        )
        result = result.overlay(terminal_node.profile)
        break
    else:
        if detection.terminals:
            logger.debug("No terminal sub-profiles found for any terminal in the process chain")

    logger.debug(f"Final profile values after overlays: {result.describe()}")
    return result
