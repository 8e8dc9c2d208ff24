"""Version parsing and bump rules.

A release version is a ``semver.Version`` triple plus an optional pre-release
suffix made of letters and an optional number (``1.4.0beta2``). The suffix
arithmetic is custom, so the text is read with a small tokenizer instead of
``semver.Version.parse``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

import semver

NUMBER = "number"
DOT = "dot"
WORD = "word"

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class BumpKind(str, Enum):
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @classmethod
    def from_text(cls, value: Optional[str]) -> "BumpKind":
        """Return the matching kind, falling back to ``PATCH``."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PATCH


@dataclass(frozen=True)
class Suffix:
    letters: str
    number: Optional[int] = None

    def __str__(self) -> str:
        if self.number is None:
            return self.letters
        return f"{self.letters}{self.number}"


@dataclass(frozen=True)
class ReleaseVersion:
    core: semver.Version
    suffix: Optional[Suffix] = None

    @classmethod
    def parse(cls, text: str) -> "ReleaseVersion":
        version = parse_version(text)
        if version is None:
            raise ValueError(f"{text!r} is not a valid version")
        return version

    def __str__(self) -> str:
        return f"{self.core.major}.{self.core.minor}.{self.core.patch}{self.suffix or ''}"


def tokenize(text: str) -> Optional[List[Tuple[str, str]]]:
    """Split ``text`` into number, dot and word tokens.

    Returns ``None`` as soon as a character outside ASCII digits, ASCII
    letters and ``.`` is seen.
    """
    tokens: List[Tuple[str, str]] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == ".":
            tokens.append((DOT, char))
            i += 1
            continue
        if char in _DIGITS:
            charset, kind = _DIGITS, NUMBER
        elif char in _LETTERS:
            charset, kind = _LETTERS, WORD
        else:
            return None
        start = i
        while i < len(text) and text[i] in charset:
            i += 1
        tokens.append((kind, text[start:i]))
    return tokens


def parse_version(text: str) -> Optional[ReleaseVersion]:
    """Parse ``MAJOR.MINOR.PATCH[letters[number]]``, a leading ``v`` allowed.

    Returns ``None`` when the text is not a version.
    """
    if text.startswith("v"):
        text = text[1:]
    tokens = tokenize(text)
    if not tokens:
        return None

    expected = [NUMBER, DOT, NUMBER, DOT, NUMBER]
    if [kind for kind, _ in tokens[:5]] != expected:
        return None
    major, minor, patch = (int(value) for _, value in tokens[0:5:2])

    rest = tokens[5:]
    suffix = None
    if rest:
        kinds = [kind for kind, _ in rest]
        if kinds == [WORD]:
            suffix = Suffix(rest[0][1])
        elif kinds == [WORD, NUMBER]:
            suffix = Suffix(rest[0][1], int(rest[1][1]))
        else:
            return None

    return ReleaseVersion(semver.Version(major, minor, patch), suffix)


def bump(version: ReleaseVersion, kind: BumpKind) -> ReleaseVersion:
    """Return the version following ``version`` for ``kind``.

    Major and minor bumps restart a suffix counter at 1. A patch bump on a
    suffixed version only advances the suffix counter.
    """
    suffix = version.suffix
    if kind is BumpKind.MAJOR:
        core = version.core.bump_major()
    elif kind is BumpKind.MINOR:
        core = version.core.bump_minor()
    else:
        if suffix is None:
            return ReleaseVersion(version.core.bump_patch())
        return replace(version, suffix=Suffix(suffix.letters, (suffix.number or 0) + 1))

    if suffix is not None:
        suffix = Suffix(suffix.letters, 1)
    return ReleaseVersion(core, suffix)


def bump_text(text: str, kind: BumpKind) -> str:
    """Bump a version string; text that is not a version comes back as is."""
    version = parse_version(text)
    if version is None:
        return text
    return str(bump(version, kind))
