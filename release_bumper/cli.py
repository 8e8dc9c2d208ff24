"""Command line entry point: resolve the next version and publish it."""

from __future__ import annotations

import sys

import httpx
import structlog
from pydantic import ValidationError

from .errors import ReleaseBumpError
from .github import GitHubReleases
from .log import configure_logging
from .outputs import write_outputs
from .resolver import Resolution, ResolutionContext, resolve_next_version
from .settings import Settings

logger = structlog.get_logger(__name__)


def run(settings: Settings, client: GitHubReleases) -> Resolution:
    tags = client.list_release_tags(settings.owner, settings.repo)
    context = ResolutionContext.build(
        tags,
        prefix=settings.prefix,
        suffix=settings.suffix,
        bump_kind=settings.bump_kind,
        explicit_start=settings.explicit_start,
    )
    resolution = resolve_next_version(context)
    logger.info(f"New version: {resolution.version} (tag {resolution.tag})")
    write_outputs(settings.output_path, version=resolution.version, tag=resolution.tag)

    if not client.has_token:
        logger.info("GitHub token not provided, release not created")
        return resolution

    url = client.create_release(settings.owner, settings.repo, resolution.tag)
    logger.info(f"New release created: {url}")
    write_outputs(settings.output_path, release_url=url)
    return resolution


def main() -> int:
    configure_logging()
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 1
    configure_logging(settings.log_level)

    try:
        with GitHubReleases(settings.token_value, api_url=settings.api_url) as client:
            run(settings, client)
    except (ReleaseBumpError, httpx.HTTPError) as exc:
        logger.error(f"Failed to get or create release: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
