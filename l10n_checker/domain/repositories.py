"""Collaborator interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import ActualKeySet, LocaleValue


class KeySource(Protocol):
    """Provides the declared keys of one key type and its catalog metadata."""

    key_type: str

    def get_base_name(self) -> str | None:
        ...

    def get_locale_identifiers(self) -> Sequence[str]:
        ...

    def get_charset_for_locale(self, locale: LocaleValue) -> str:
        ...

    def get_expected_keys(self) -> Sequence[str]:
        ...


class CatalogSource(Protocol):
    """Resolves the keys present in a localized catalog.

    Implementations must be safe to call from several threads at once.
    """

    def resolve(self, base_name: str, locale: LocaleValue, charset: str) -> ActualKeySet:
        ...


class LocaleParser(Protocol):
    def parse(self, identifier: str) -> LocaleValue:
        ...
