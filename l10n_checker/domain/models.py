"""Domain models for message key verification.

These dataclasses capture the key sets being compared and the discrepancies
reported between them. All of them are immutable.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from l10n_checker.config import SETTINGS


class DiscrepancyKind(Enum):
    NO_BASE_NAME = "NoBaseName"
    NO_LOCALE_METADATA = "NoLocaleMetadata"
    CATALOG_NOT_FOUND = "CatalogNotFound"
    EMPTY_CATALOG = "EmptyCatalog"
    EMPTY_KEY_SET = "EmptyKeySet"
    MISSING_FROM_CATALOG = "MissingFromCatalog"
    UNEXPECTED_IN_CATALOG = "UnexpectedInCatalog"


_KEY_SPECIFIC_KINDS = frozenset(
    {DiscrepancyKind.MISSING_FROM_CATALOG, DiscrepancyKind.UNEXPECTED_IN_CATALOG}
)
_CATALOG_LEVEL_KINDS = frozenset(
    {
        DiscrepancyKind.NO_BASE_NAME,
        DiscrepancyKind.CATALOG_NOT_FOUND,
        DiscrepancyKind.EMPTY_CATALOG,
        DiscrepancyKind.EMPTY_KEY_SET,
    }
)


@dataclass(frozen=True)
class LocaleValue:
    """A language/country/variant triple selecting a catalog variant."""

    language: str
    country: str = ""
    variant: str = ""

    @property
    def tag(self) -> str:
        if self.variant:
            return f"{self.language}_{self.country}_{self.variant}"
        if self.country:
            return f"{self.language}_{self.country}"
        return self.language

    def candidates(self) -> Iterator[str]:
        """Yield lookup suffixes from the most specific to the language alone."""
        if self.variant:
            yield f"{self.language}_{self.country}_{self.variant}"
        if self.country:
            yield f"{self.language}_{self.country}"
        yield self.language

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class ExpectedKeySet:
    """Keys declared by a key type, in declaration order."""

    key_type: str
    keys: tuple[str, ...]

    @classmethod
    def of(cls, key_type: str, keys: Iterable[str]) -> "ExpectedKeySet":
        return cls(key_type=key_type, keys=tuple(keys))

    def __len__(self) -> int:
        return len(self.keys)


@dataclass(frozen=True)
class ActualKeySet:
    """Keys found in one catalog; ``keys is None`` when the catalog is absent."""

    base_name: str
    locale: LocaleValue
    charset: str
    keys: frozenset[str] | None

    @classmethod
    def absent(cls, base_name: str, locale: LocaleValue, charset: str) -> "ActualKeySet":
        return cls(base_name=base_name, locale=locale, charset=charset, keys=None)

    @classmethod
    def present(
        cls, base_name: str, locale: LocaleValue, charset: str, keys: Iterable[str]
    ) -> "ActualKeySet":
        return cls(base_name=base_name, locale=locale, charset=charset, keys=frozenset(keys))

    @property
    def is_absent(self) -> bool:
        return self.keys is None


@dataclass(frozen=True)
class Discrepancy:
    """A single mismatch between declared keys and a catalog."""

    kind: DiscrepancyKind
    key_type: str
    locale: LocaleValue | None
    key: str = ""
    base_name: str | None = None

    def __post_init__(self) -> None:
        if (self.locale is None) != (self.kind is DiscrepancyKind.NO_LOCALE_METADATA):
            raise ValueError(f"locale must be None only for {DiscrepancyKind.NO_LOCALE_METADATA.value}")
        if self.kind in _KEY_SPECIFIC_KINDS and not self.key:
            raise ValueError(f"{self.kind.value} requires the offending key")
        if self.kind in _CATALOG_LEVEL_KINDS and self.key:
            raise ValueError(f"{self.kind.value} does not name a key")

    @property
    def locale_label(self) -> str:
        return SETTINGS.all_locales_marker if self.locale is None else self.locale.tag

    @property
    def message(self) -> str:
        kind = self.kind
        locale = self.locale_label
        if kind is DiscrepancyKind.NO_BASE_NAME:
            return f"No catalog base name declared for key type [{self.key_type}]"
        if kind is DiscrepancyKind.NO_LOCALE_METADATA:
            return f"No locales declared for key type [{self.key_type}]"
        if kind is DiscrepancyKind.CATALOG_NOT_FOUND:
            return (
                f"Failed to locate catalog [{self.base_name}] for locale [{locale}]"
                f" of key type [{self.key_type}]"
            )
        if kind is DiscrepancyKind.EMPTY_CATALOG:
            return f"Empty catalog [{self.base_name}] for locale [{locale}]"
        if kind is DiscrepancyKind.EMPTY_KEY_SET:
            return f"Empty key type [{self.key_type}]"
        if kind is DiscrepancyKind.MISSING_FROM_CATALOG:
            return (
                f"Key [{self.key}] declared in key type [{self.key_type}] but absent"
                f" from catalog [{self.base_name}] for locale [{locale}]"
            )
        return (
            f"Key [{self.key}] present in catalog [{self.base_name}] for locale [{locale}]"
            f" but absent from key type [{self.key_type}]"
        )

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.key_type} {self.locale_label} {self.key}: {self.message}"
