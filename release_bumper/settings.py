"""Process configuration, read once from the environment."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .github import DEFAULT_API_URL
from .versions import BumpKind, ReleaseVersion


class Settings(BaseSettings):
    """Inputs of one run.

    GitHub Actions ``INPUT_*`` variables win over the plain ones. ``owner``
    and ``repo`` fall back to ``GITHUB_REPOSITORY`` (``owner/repo``).
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    owner: Optional[str] = Field(default=None, validation_alias=AliasChoices("INPUT_OWNER", "GITHUB_OWNER"))
    repo: Optional[str] = Field(default=None, validation_alias=AliasChoices("INPUT_REPO", "GITHUB_REPO"))
    repository: Optional[str] = Field(default=None, validation_alias=AliasChoices("GITHUB_REPOSITORY"))
    bump_kind: BumpKind = Field(
        default=BumpKind.PATCH, validation_alias=AliasChoices("INPUT_BUMP_TYPE", "BUMP_TYPE")
    )
    explicit_version: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("INPUT_VERSION", "VERSION")
    )
    token: Optional[SecretStr] = Field(default=None, validation_alias=AliasChoices("INPUT_TOKEN", "GITHUB_TOKEN"))
    prefix: str = Field(default="", validation_alias=AliasChoices("INPUT_PREFIX", "TAG_PREFIX"))
    suffix: str = Field(default="", validation_alias=AliasChoices("INPUT_SUFFIX", "TAG_SUFFIX"))
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias=AliasChoices("GITHUB_API_URL"))
    output_path: Optional[str] = Field(default=None, validation_alias=AliasChoices("GITHUB_OUTPUT"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    @field_validator("bump_kind", mode="before")
    @classmethod
    def _coerce_bump_kind(cls, value):
        if isinstance(value, BumpKind):
            return value
        return BumpKind.from_text(value)

    @field_validator("explicit_version")
    @classmethod
    def _check_explicit_version(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        ReleaseVersion.parse(value)
        return value

    @model_validator(mode="after")
    def _derive_repository(self) -> "Settings":
        if self.repository and "/" in self.repository:
            owner, _, repo = self.repository.partition("/")
            self.owner = self.owner or owner
            self.repo = self.repo or repo
        if not self.owner or not self.repo:
            raise ValueError("repository owner and name are required (set GITHUB_REPOSITORY)")
        return self

    @property
    def explicit_start(self) -> Optional[ReleaseVersion]:
        if self.explicit_version is None:
            return None
        return ReleaseVersion.parse(self.explicit_version)

    @property
    def token_value(self) -> Optional[str]:
        if self.token is None:
            return None
        return self.token.get_secret_value() or None
