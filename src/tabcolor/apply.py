"""Hand a resolved profile to whatever actually sets the colors."""

import logging
from enum import Enum
from typing import Protocol

from tabcolor.errors import ApplyError
from tabcolor.models import Profile

logger = logging.getLogger(__name__)


class ColorTarget(Enum):
    TAB = "tab"
    FOREGROUND = "fg"
    BACKGROUND = "bg"


class ColorApplier(Protocol):
    """Applies individual settings to the terminal."""

    def set_preset(self, name: str) -> None: ...

    def set_color(self, target: ColorTarget, value: str) -> None: ...


def apply_profile(profile: Profile, applier: ColorApplier) -> None:
    """
    Apply every non-empty field of ``profile``.

    The preset goes first so that tab, fg and bg override it.

    Raises:
        ApplyError: the applier failed; the message names the field.
    """
    if profile.preset:
        logger.debug(f"Setting preset: {profile.preset!r}")
        try:
            applier.set_preset(profile.preset)
        except Exception as e:
            raise ApplyError(f"error setting preset from profile: {e}") from e

    steps = (
        (ColorTarget.TAB, profile.tab, "tab"),
        (ColorTarget.FOREGROUND, profile.foreground, "foreground"),
        (ColorTarget.BACKGROUND, profile.background, "background"),
    )
    for target, value, label in steps:
        if not value:
            continue
        logger.debug(f"Setting {label} color: {value!r}")
        try:
            applier.set_color(target, value)
        except Exception as e:
            raise ApplyError(f"error setting {label} color from profile: {e}") from e
