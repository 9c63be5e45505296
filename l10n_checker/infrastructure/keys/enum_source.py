"""Key sources built from static declarations or Python enums."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Mapping, Sequence, TypeVar

from l10n_checker.config import SETTINGS
from l10n_checker.domain.models import LocaleValue
from l10n_checker.domain.repositories import KeySource

METADATA_ATTRIBUTE = "__l10n_metadata__"

E = TypeVar("E", bound=type[Enum])


@dataclass(frozen=True)
class KeyTypeMetadata:
    """Catalog metadata declared alongside a key type."""

    base_name: str | None = None
    locales: tuple[str, ...] = ()
    charsets: Mapping[str, str] = field(default_factory=dict)


def message_keys(
    base_name: str | None = None,
    locales: Iterable[str] = (),
    charsets: Mapping[str, str] | None = None,
) -> Callable[[E], E]:
    """Class decorator attaching catalog metadata to an enum of message keys."""

    def decorate(enum_type: E) -> E:
        metadata = KeyTypeMetadata(
            base_name=base_name,
            locales=tuple(locales),
            charsets=dict(charsets or {}),
        )
        setattr(enum_type, METADATA_ATTRIBUTE, metadata)
        return enum_type

    return decorate


def _unique(keys: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(keys))


@dataclass(frozen=True)
class StaticKeySource(KeySource):
    key_type: str
    keys: Sequence[str]
    base_name: str | None = None
    locales: Sequence[str] = ()
    charsets: Mapping[str, str] = field(default_factory=dict)
    default_charset: str = SETTINGS.default_charset

    def get_base_name(self) -> str | None:
        return self.base_name

    def get_locale_identifiers(self) -> Sequence[str]:
        return tuple(self.locales)

    def get_charset_for_locale(self, locale: LocaleValue) -> str:
        for tag in (locale.tag, locale.language):
            if tag in self.charsets:
                return self.charsets[tag]
        return self.default_charset

    def get_expected_keys(self) -> Sequence[str]:
        return _unique(self.keys)


class EnumKeySource(StaticKeySource):
    """Key source whose keys are the member names of an ``Enum``."""

    @classmethod
    def from_enum(
        cls,
        enum_type: type[Enum],
        base_name: str | None = None,
        locales: Iterable[str] | None = None,
        charsets: Mapping[str, str] | None = None,
        default_charset: str = SETTINGS.default_charset,
    ) -> "EnumKeySource":
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"Unsupported key type: {enum_type!r}")
        declared = getattr(enum_type, METADATA_ATTRIBUTE, None) or KeyTypeMetadata()
        merged_charsets = dict(declared.charsets)
        merged_charsets.update(charsets or {})
        return cls(
            key_type=enum_type.__qualname__,
            keys=tuple(member.name for member in enum_type),
            base_name=base_name if base_name is not None else declared.base_name,
            locales=tuple(locales) if locales is not None else declared.locales,
            charsets=merged_charsets,
            default_charset=default_charset,
        )
