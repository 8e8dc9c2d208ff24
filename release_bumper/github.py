"""Thin client over the GitHub releases REST endpoints."""

from __future__ import annotations

from typing import List, Optional

import httpx
import structlog

from .errors import PublishError, ReleaseListingError

logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"
RELEASE_BODY = "Auto bump to {tag}"


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return response.text or None
    if isinstance(payload, dict):
        return payload.get("message")
    return None


class GitHubReleases:
    """List and create releases of a repository.

    No timeout and no retries are configured: each call either completes or
    raises.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_url: str = DEFAULT_API_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.has_token = bool(token)
        self._client = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers=headers,
            timeout=None,
            transport=transport,
        )

    def __enter__(self) -> "GitHubReleases":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def list_release_tags(self, owner: str, repo: str) -> List[str]:
        """Return every release tag name, newest first.

        Pages are followed through the ``Link`` header. A repository without
        releases (404) gives an empty list.
        """
        response = self._client.get(f"/repos/{owner}/{repo}/releases", params={"per_page": 100})
        if response.status_code == 404:
            logger.info("No releases found", repository=f"{owner}/{repo}")
            return []

        tags = []
        while True:
            if response.is_error:
                raise ReleaseListingError(response.status_code, _error_message(response))
            tags.extend(release["tag_name"] for release in response.json() if release.get("tag_name"))
            next_page = response.links.get("next")
            if not next_page:
                return tags
            response = self._client.get(next_page["url"])

    def create_release(self, owner: str, repo: str, tag: str) -> str:
        """Create a published release named after ``tag`` and return its URL."""
        payload = {
            "tag_name": tag,
            "name": tag,
            "body": RELEASE_BODY.format(tag=tag),
            "draft": False,
            "prerelease": False,
        }
        response = self._client.post(f"/repos/{owner}/{repo}/releases", json=payload)
        if response.is_error:
            raise PublishError(response.status_code, _error_message(response))
        return response.json()["html_url"]
