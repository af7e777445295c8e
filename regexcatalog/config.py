"""Library configuration via Pydantic Settings.

All configuration is driven by environment variables prefixed with
``REGEXCATALOG_``. Every setting has a default, so the catalog works with no
environment at all.

Usage::

    from regexcatalog.config import get_settings

    settings = get_settings()
    print(settings.self_check)

The ``get_settings`` function is cached with ``functools.lru_cache``. To override
settings in tests, set the relevant environment variables and call
``get_settings.cache_clear()`` before the next ``get_settings()`` call.
"""
from __future__ import annotations

import functools

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """regexcatalog settings.

    Environment variables are read case-insensitively. A ``.env`` file in the
    working directory is loaded automatically when present; unrelated keys in
    it are ignored.
    """

    model_config = SettingsConfigDict(
        env_prefix="REGEXCATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    self_check: bool = Field(
        default=True,
        description="Compile every tag with re.compile when a catalog is built",
    )
    legacy_warning: bool = Field(
        default=True,
        description="Log a warning whenever the superseded anchored table is requested",
    )
    compile_cache_size: int = Field(
        default=256,
        ge=1,
        le=65_536,
        description="Maximum number of compiled patterns memoized by compile_pattern",
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide :class:`Settings`, read once from the environment.

    Catalogs and the compile memo consult this on every build, so calling
    ``get_settings.cache_clear()`` makes the next build pick up changed
    ``REGEXCATALOG_*`` variables.
    """
    return Settings()
