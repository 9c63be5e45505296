"""Verification of message key declarations against localized catalogs."""
from l10n_checker.application.use_cases import (
    MessageKeyVerifier,
    VerificationContext,
    VerifyCatalogsUseCase,
)
from l10n_checker.domain.models import (
    ActualKeySet,
    Discrepancy,
    DiscrepancyKind,
    ExpectedKeySet,
    LocaleValue,
)
from l10n_checker.domain.services import KeySetReconciler
from l10n_checker.infrastructure.keys.enum_source import (
    EnumKeySource,
    StaticKeySource,
    message_keys,
)
from l10n_checker.infrastructure.parsing.locale import LocaleFormatError, parse_locale
from l10n_checker.infrastructure.repositories.catalog_repositories import (
    ExcelCatalogSource,
    FileSystemCatalogSource,
    InMemoryCatalogSource,
)

__all__ = [
    "ActualKeySet",
    "Discrepancy",
    "DiscrepancyKind",
    "EnumKeySource",
    "ExcelCatalogSource",
    "ExpectedKeySet",
    "FileSystemCatalogSource",
    "InMemoryCatalogSource",
    "KeySetReconciler",
    "LocaleFormatError",
    "LocaleValue",
    "MessageKeyVerifier",
    "StaticKeySource",
    "VerificationContext",
    "VerifyCatalogsUseCase",
    "message_keys",
    "parse_locale",
]
