"""Application services orchestrating catalog verification."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from l10n_checker.config import SETTINGS
from l10n_checker.domain.models import (
    Discrepancy,
    DiscrepancyKind,
    ExpectedKeySet,
    LocaleValue,
)
from l10n_checker.domain.repositories import CatalogSource, KeySource, LocaleParser
from l10n_checker.domain.results import VerificationReport
from l10n_checker.domain.services import KeySetReconciler
from l10n_checker.infrastructure.parsing.locale import DefaultLocaleParser

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VerificationContext:
    key_source: KeySource
    catalog_source: CatalogSource
    locale_parser: LocaleParser = field(default_factory=DefaultLocaleParser)
    reconciler: KeySetReconciler = field(default_factory=KeySetReconciler)


class MessageKeyVerifier:
    """Checks the keys of one key type against its catalogs, locale by locale."""

    def __init__(self, context: VerificationContext) -> None:
        if context is None:
            raise TypeError("A verification context is required")
        self._context = context

    @property
    def key_type(self) -> str:
        return self._context.key_source.key_type

    def verify_locale(self, locale: LocaleValue | str) -> list[Discrepancy]:
        return self._verify(self._coerce_locale(locale), None)

    def verify_all_locales(self) -> list[Discrepancy]:
        identifiers = self._context.key_source.get_locale_identifiers()
        if not identifiers:
            base_name = self._context.key_source.get_base_name()
            logger.info("Key type %s declares no locales", self.key_type)
            return [
                Discrepancy(
                    kind=DiscrepancyKind.NO_LOCALE_METADATA,
                    key_type=self.key_type,
                    locale=None,
                    key=SETTINGS.all_locales_marker,
                    base_name=base_name,
                )
            ]

        locales = [self._context.locale_parser.parse(identifier) for identifier in identifiers]
        expected = self._expected_keys()
        discrepancies: list[Discrepancy] = []
        for locale in locales:
            discrepancies.extend(self._verify(locale, expected))
        return discrepancies

    def type_isolated_verify(self, locale: LocaleValue | str) -> list[str]:
        return [str(item) for item in self.verify_locale(locale)]

    def _verify(self, locale: LocaleValue, expected: ExpectedKeySet | None) -> list[Discrepancy]:
        key_source = self._context.key_source
        base_name = key_source.get_base_name()
        if base_name is None:
            logger.info("Key type %s declares no catalog base name", self.key_type)
            return [
                Discrepancy(
                    kind=DiscrepancyKind.NO_BASE_NAME,
                    key_type=self.key_type,
                    locale=locale,
                )
            ]

        charset = key_source.get_charset_for_locale(locale)
        actual = self._context.catalog_source.resolve(base_name, locale, charset)
        if expected is None:
            expected = self._expected_keys()
        discrepancies = self._context.reconciler.reconcile(expected, actual)
        logger.debug(
            "Verified %s against %s for locale %s: %d discrepancies",
            self.key_type,
            base_name,
            locale,
            len(discrepancies),
        )
        return discrepancies

    def _expected_keys(self) -> ExpectedKeySet:
        return ExpectedKeySet.of(self.key_type, self._context.key_source.get_expected_keys())

    def _coerce_locale(self, locale: LocaleValue | str) -> LocaleValue:
        if isinstance(locale, LocaleValue):
            return locale
        if isinstance(locale, str):
            return self._context.locale_parser.parse(locale)
        raise TypeError(f"Unsupported locale type: {type(locale)!r}")


class VerifyCatalogsUseCase:
    def __init__(self, context: VerificationContext) -> None:
        self._verifier = MessageKeyVerifier(context)

    def execute(self, locale: LocaleValue | str | None = None) -> VerificationReport:
        if locale is None:
            discrepancies: Sequence[Discrepancy] = self._verifier.verify_all_locales()
        else:
            discrepancies = self._verifier.verify_locale(locale)
        report = VerificationReport.build(self._verifier.key_type, discrepancies)
        logger.info(
            "Verification of %s finished with %d discrepancies",
            self._verifier.key_type,
            report.summary.total,
        )
        return report
