"""Central configuration for the catalog checker package."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CHARSET = "UTF-8"
CATALOG_EXTENSION = ".properties"
ALL_LOCALES_MARKER = "*"


@dataclass(slots=True, frozen=True)
class Settings:
    default_charset: str
    catalog_extension: str
    all_locales_marker: str


SETTINGS = Settings(
    default_charset=DEFAULT_CHARSET,
    catalog_extension=CATALOG_EXTENSION,
    all_locales_marker=ALL_LOCALES_MARKER,
)
