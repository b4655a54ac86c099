"""Rewriter configuration using pydantic-settings.

Values that describe the host's routing setup live here and can be set via
``TAGBASE_*`` environment variables or a ``.env`` file. Host-owned values
that change at runtime (``tag_base``, ``home``) are read from the option
store instead. Tests construct ``Settings(_env_file=None, ...)`` directly.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagbase.invalidation import FLUSH_OPTION
from tagbase.rules import blog_prefix, default_tag_permastruct
from tagbase.urls import DEFAULT_TAG_BASE


class Settings(BaseSettings):
    """Routing and storage settings for the rewriter."""

    model_config = SettingsConfigDict(
        env_prefix="TAGBASE_",
        env_file=".env",
        extra="ignore",
    )

    default_tag_base: str = DEFAULT_TAG_BASE
    pagination_base: str = "page"
    permalink_structure: str = "/%postname%/"
    tag_permastruct: str | None = None
    multisite: bool = False
    subdomain_install: bool = False
    main_site: bool = True
    flush_option: str = FLUSH_OPTION

    @field_validator("pagination_base")
    @classmethod
    def pagination_base_not_empty(cls, value: str) -> str:
        value = value.strip("/")
        if not value:
            msg = "pagination_base must not be empty"
            raise ValueError(msg)
        return value

    @property
    def trailing_slash(self) -> bool:
        """Whether archive links end in a slash."""
        return self.permalink_structure.endswith("/")

    @property
    def blog_prefix(self) -> str:
        return blog_prefix(
            multisite=self.multisite,
            subdomain_install=self.subdomain_install,
            main_site=self.main_site,
        )

    def permastruct_for(self, tag_base: str | None) -> str:
        """Tag permastruct, derived from the tag base unless set explicitly."""
        if self.tag_permastruct:
            return self.tag_permastruct
        return default_tag_permastruct(tag_base or self.default_tag_base)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
