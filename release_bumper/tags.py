"""Map between release tags and the versions wrapped inside them."""

from __future__ import annotations

from typing import Optional

from .versions import ReleaseVersion, parse_version


def extract_version(tag: str, prefix: str = "", suffix: str = "") -> Optional[ReleaseVersion]:
    """Return the version inside ``tag``, or ``None`` if the tag does not match."""
    if prefix and not tag.startswith(prefix):
        return None
    if suffix and not tag.endswith(suffix):
        return None
    end = len(tag) - len(suffix)
    if end < len(prefix):
        # prefix and suffix overlap
        return None
    return parse_version(tag[len(prefix):end])


def construct_tag(version: ReleaseVersion, prefix: str = "", suffix: str = "") -> str:
    return f"{prefix}{version}{suffix}"
