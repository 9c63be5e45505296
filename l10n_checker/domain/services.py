"""Domain services implementing key set reconciliation."""
from __future__ import annotations

from .models import ActualKeySet, Discrepancy, DiscrepancyKind, ExpectedKeySet


class KeySetReconciler:
    """Compares declared keys against the keys of a single catalog."""

    def reconcile(self, expected: ExpectedKeySet, actual: ActualKeySet) -> list[Discrepancy]:
        if not isinstance(expected, ExpectedKeySet):
            raise TypeError(f"expected must be an ExpectedKeySet, got {type(expected)!r}")
        if not isinstance(actual, ActualKeySet):
            raise TypeError(f"actual must be an ActualKeySet, got {type(actual)!r}")

        discrepancies: list[Discrepancy] = []

        if actual.is_absent:
            discrepancies.append(self._build(DiscrepancyKind.CATALOG_NOT_FOUND, expected, actual))
            return discrepancies

        if not actual.keys:
            discrepancies.append(self._build(DiscrepancyKind.EMPTY_CATALOG, expected, actual))

        # catalog-level failures suppress key-by-key comparison
        if discrepancies:
            return discrepancies

        if not expected.keys:
            discrepancies.append(self._build(DiscrepancyKind.EMPTY_KEY_SET, expected, actual))

        remaining = set(actual.keys)
        for key in expected.keys:
            if key in remaining:
                remaining.remove(key)
            else:
                discrepancies.append(
                    self._build(DiscrepancyKind.MISSING_FROM_CATALOG, expected, actual, key)
                )

        for key in sorted(remaining):
            discrepancies.append(
                self._build(DiscrepancyKind.UNEXPECTED_IN_CATALOG, expected, actual, key)
            )
        return discrepancies

    @staticmethod
    def _build(
        kind: DiscrepancyKind, expected: ExpectedKeySet, actual: ActualKeySet, key: str = ""
    ) -> Discrepancy:
        return Discrepancy(
            kind=kind,
            key_type=expected.key_type,
            locale=actual.locale,
            key=key,
            base_name=actual.base_name,
        )
