"""Translate shell-style filename masks into compiled patterns.

Only two wildcards are understood: ``*`` (zero or more characters) and
``?`` (exactly one character). Everything else, including ``[`` and ``.``,
matches itself. Matching is case-insensitive and covers the whole name.
"""

import os
import re

from ..common.exceptions import ConfigError

_WILDCARDS = {"*": ".*", "?": "."}


def mask_to_regex(mask: str) -> str:
    """Build the anchored regular expression source for a mask."""
    parts = [_WILDCARDS.get(char) or re.escape(char) for char in mask]
    return "^" + "".join(parts) + "$"


def compile_mask(mask: str) -> re.Pattern[str]:
    """Compile a filename mask.

    Args:
        mask: Mask such as ``*.txt`` or ``file?.txt``

    Returns:
        Compiled pattern; use ``fullmatch`` or ``match`` on a bare filename

    Raises:
        ConfigError: If the mask is empty or could never match a filename
    """
    if not mask:
        raise ConfigError("File name mask must not be empty")
    if "\x00" in mask:
        raise ConfigError(f"File name mask contains a NUL character: {mask!r}")
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in mask for sep in separators):
        raise ConfigError(f"File name mask must not contain a path separator: {mask!r}")

    try:
        return re.compile(mask_to_regex(mask), re.IGNORECASE | re.DOTALL)
    except re.error as e:
        raise ConfigError(f"Invalid file name mask {mask!r}: {e}") from e


def matches(pattern: re.Pattern[str], filename: str) -> bool:
    """Whole-name, case-insensitive match of a filename against a compiled mask."""
    return pattern.fullmatch(filename) is not None
