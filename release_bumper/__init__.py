"""Compute the next release version of a GitHub repository and publish it."""

from .resolver import Resolution, ResolutionContext, resolve_next_version
from .tags import construct_tag, extract_version
from .versions import BumpKind, ReleaseVersion, Suffix, bump, bump_text, parse_version

__version__ = "0.1.0"

__all__ = [
    "BumpKind",
    "ReleaseVersion",
    "Resolution",
    "ResolutionContext",
    "Suffix",
    "bump",
    "bump_text",
    "construct_tag",
    "extract_version",
    "parse_version",
    "resolve_next_version",
]
