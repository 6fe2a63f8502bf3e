"""Encoding and decoding of separator-delimited path lists."""

import os

from devshell_filter.errors import EncodeError

# Always handled as path lists, whatever the configs say.
BASELINE_PATH_VARS: tuple[str, ...] = ("PATH", "XDG_DATA_DIRS")

# Segments containing either of these cannot be joined into a path list.
_FORBIDDEN = (os.pathsep, "\0")


def split(value: str) -> list[str]:
    """Split a path list into its segments, keeping empty segments."""
    if not value:
        return []
    return value.split(os.pathsep)


def join(segments: list[str]) -> str:
    """Join segments into a path list.

    Raises EncodeError if a segment contains the path separator or a NUL
    byte, since the result would not split back into the same segments.
    """
    for segment in segments:
        for forbidden in _FORBIDDEN:
            if forbidden in segment:
                raise EncodeError(f"path segment {segment!r} contains {forbidden!r}")
    return os.pathsep.join(segments)


def combine(existing: str, addition: str, sep: str = ":") -> str:
    """Append ``addition`` to ``existing``, skipping the separator when empty."""
    if not existing:
        return addition
    return existing + sep + addition
