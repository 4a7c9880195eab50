"""Wrapping modes and their lookup table.

WHY: Callers (the subtitle CLI, the HTTP API, config files) name the
wrapping mode as a string, while the engine wants a closed set of values.
Centralizing the names here lets every caller resolve a mode the same way.

HOW: WrapMode is a str-valued Enum. MODES maps accepted names, including
aliases, to members. resolve_mode() turns a member or a name into a member.

RULES:
- "wide" packs as many words per line as the limit allows.
- "evenly" packs like "wide", then balances line lengths.
- Names are matched case-insensitively; aliases never appear in output.
"""

from enum import Enum
from typing import Dict, Union


class InvalidArgument(ValueError):
    """Raised when a wrap call gets an argument it cannot work with."""


class WrapMode(str, Enum):
    WIDE = "wide"
    EVENLY = "evenly"


MODE_DESCRIPTIONS: Dict[WrapMode, str] = {
    WrapMode.WIDE: (
        "Fit as many words on each line as possible while respecting "
        "the maximum characters per line"
    ),
    WrapMode.EVENLY: (
        "Reflow into lines of a similar width while respecting "
        "the maximum characters per line"
    ),
}

# Mode lookup by name
MODES: Dict[str, WrapMode] = {
    "wide": WrapMode.WIDE,
    "greedy": WrapMode.WIDE,  # Alias
    "evenly": WrapMode.EVENLY,
    "even": WrapMode.EVENLY,  # Alias
    "balanced": WrapMode.EVENLY,  # Alias
}


def resolve_mode(mode: Union[WrapMode, str]) -> WrapMode:
    """Return the WrapMode for a member or a (case-insensitive) mode name.

    Raises:
        InvalidArgument: If the name is not a known mode or alias.
    """
    if isinstance(mode, WrapMode):
        return mode
    if isinstance(mode, str):
        found = MODES.get(mode.strip().lower())
        if found is not None:
            return found
    raise InvalidArgument(
        "Unknown wrap mode '{}'. Available: {}".format(
            mode, ", ".join(MODES.keys())
        )
    )
