"""Pick the next free release version from an existing tag history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import structlog

from .errors import ResolutionError
from .tags import construct_tag, extract_version
from .versions import BumpKind, ReleaseVersion, bump, parse_version

logger = structlog.get_logger(__name__)

EXPLICIT_UNUSED = "explicit-unused"
EXPLICIT_BUMPED = "explicit-bumped"
DEFAULT = "default"
LATEST_BUMPED = "latest-bumped"

DEFAULT_VERSIONS = {
    BumpKind.MAJOR: "1.0.0",
    BumpKind.MINOR: "0.1.0",
    BumpKind.PATCH: "0.0.1",
}


@dataclass(frozen=True)
class ResolutionContext:
    """Inputs of one resolution.

    ``existing_tags`` must be ordered newest first, which is the order the
    GitHub releases listing returns.
    """

    existing_tags: Tuple[str, ...]
    prefix: str = ""
    suffix: str = ""
    bump_kind: BumpKind = BumpKind.PATCH
    explicit_start: Optional[ReleaseVersion] = None

    @classmethod
    def build(
        cls,
        existing_tags: Iterable[str],
        prefix: str = "",
        suffix: str = "",
        bump_kind: BumpKind = BumpKind.PATCH,
        explicit_start: Optional[ReleaseVersion] = None,
    ) -> "ResolutionContext":
        return cls(tuple(existing_tags), prefix or "", suffix or "", bump_kind, explicit_start)


@dataclass(frozen=True)
class Resolution:
    version: ReleaseVersion
    tag: str
    base: Optional[ReleaseVersion]
    reason: str
    collisions: Tuple[str, ...] = ()


def default_version(kind: BumpKind) -> ReleaseVersion:
    return parse_version(DEFAULT_VERSIONS[kind])


def match_tags(context: ResolutionContext) -> List[Tuple[str, ReleaseVersion]]:
    """Return ``(tag, version)`` for each matching tag, in listing order."""
    matched = []
    for tag in context.existing_tags:
        version = extract_version(tag, context.prefix, context.suffix)
        if version is None:
            logger.debug("Ignoring tag that does not match the pattern", tag=tag)
            continue
        matched.append((tag, version))
    return matched


def _pick_candidate(
    context: ResolutionContext, matched: List[Tuple[str, ReleaseVersion]]
) -> Tuple[ReleaseVersion, Optional[ReleaseVersion], str]:
    kind = context.bump_kind
    explicit = context.explicit_start

    if explicit is not None:
        if explicit not in {version for _, version in matched}:
            logger.info(f"Version {explicit} has not been released yet, using it as is")
            return explicit, explicit, EXPLICIT_UNUSED
        candidate = bump(explicit, kind)
        logger.info(f"Version {explicit} already exists, {kind.value} bump to {candidate}")
        return candidate, explicit, EXPLICIT_BUMPED

    if not matched:
        candidate = default_version(kind)
        logger.info(f"No matching release found, starting from default version {candidate}")
        return candidate, None, DEFAULT

    latest_tag, latest = matched[0]
    candidate = bump(latest, kind)
    logger.info(f"Latest matching release is {latest_tag}, {kind.value} bump to {candidate}")
    return candidate, latest, LATEST_BUMPED


def resolve_next_version(context: ResolutionContext) -> Resolution:
    """Decide the next version and the full tag it will be published under.

    The candidate is bumped again for as long as its tag already exists. Every
    bump strictly increases the version, so at most ``len(existing_tags)``
    retries can be needed.
    """
    matched = match_tags(context)
    logger.info(
        "Scanned existing releases",
        total=len(context.existing_tags),
        matched=len(matched),
        prefix=context.prefix,
        suffix=context.suffix,
    )

    candidate, base, reason = _pick_candidate(context, matched)

    existing = set(context.existing_tags)
    limit = len(existing) + 1
    collisions = []
    tag = construct_tag(candidate, context.prefix, context.suffix)
    while tag in existing:
        collisions.append(tag)
        if len(collisions) > limit:
            raise ResolutionError(f"no free tag found after {limit} bumps from {base or candidate}")
        candidate = bump(candidate, context.bump_kind)
        logger.info(f"Tag {tag} already exists, bumping to {candidate}")
        tag = construct_tag(candidate, context.prefix, context.suffix)

    return Resolution(
        version=candidate,
        tag=tag,
        base=base,
        reason=reason,
        collisions=tuple(collisions),
    )
