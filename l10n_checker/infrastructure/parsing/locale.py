"""Locale identifier parsing."""
from __future__ import annotations

import re

from l10n_checker.domain.models import LocaleValue

_LANGUAGE = re.compile(r"^[A-Za-z]{2,8}$")
_COUNTRY = re.compile(r"^(?:[A-Za-z]{2}|\d{3})$")
_VARIANT = re.compile(r"^[0-9A-Za-z]{1,8}$")


class LocaleFormatError(ValueError):
    """Raised when a locale identifier cannot be parsed."""


def parse_locale(identifier: str) -> LocaleValue:
    if not isinstance(identifier, str):
        raise TypeError(f"Unsupported locale identifier type: {type(identifier)!r}")
    text = identifier.strip()
    if not text:
        raise LocaleFormatError("Locale identifier is empty")

    parts = re.split(r"[_-]", text)
    if len(parts) > 3:
        raise LocaleFormatError(f"Too many components in locale identifier {identifier!r}")

    language = parts[0]
    country = parts[1] if len(parts) > 1 else ""
    variant = parts[2] if len(parts) > 2 else ""

    if not _LANGUAGE.match(language):
        raise LocaleFormatError(f"Invalid language in locale identifier {identifier!r}")
    if country and not _COUNTRY.match(country):
        raise LocaleFormatError(f"Invalid country in locale identifier {identifier!r}")
    if len(parts) > 1 and not country and not variant:
        raise LocaleFormatError(f"Dangling separator in locale identifier {identifier!r}")
    if variant and not _VARIANT.match(variant):
        raise LocaleFormatError(f"Invalid variant in locale identifier {identifier!r}")
    if len(parts) > 2 and not variant:
        raise LocaleFormatError(f"Dangling separator in locale identifier {identifier!r}")

    return LocaleValue(language=language.lower(), country=country.upper(), variant=variant)


class DefaultLocaleParser:
    def parse(self, identifier: str) -> LocaleValue:
        return parse_locale(identifier)
