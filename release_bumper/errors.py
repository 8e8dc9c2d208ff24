"""Exceptions raised while resolving or publishing a release."""

from __future__ import annotations

from typing import Optional


class ReleaseBumpError(Exception):
    """Base class for every failure the command reports."""


class GitHubError(ReleaseBumpError):
    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message or "no details"
        super().__init__(f"GitHub responded {status_code}: {self.message}")


class ReleaseListingError(GitHubError):
    """Listing releases failed with a status other than 404."""


class PublishError(GitHubError):
    """Creating the release was rejected."""


class ResolutionError(ReleaseBumpError):
    """No free tag was found within the collision limit."""
