"""Domain-level results for catalog verification."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Mapping, Sequence

from .models import Discrepancy, DiscrepancyKind


@dataclass(frozen=True)
class VerificationSummary:
    key_type: str
    total: int
    by_kind: Mapping[DiscrepancyKind, int]
    by_locale: Mapping[str, int]
    generated_at: datetime

    def count(self, kind: DiscrepancyKind) -> int:
        return self.by_kind.get(kind, 0)


@dataclass(frozen=True)
class VerificationReport:
    summary: VerificationSummary
    discrepancies: Sequence[Discrepancy] = field(default_factory=tuple)

    @classmethod
    def build(cls, key_type: str, discrepancies: Iterable[Discrepancy]) -> "VerificationReport":
        items = tuple(discrepancies)
        summary = VerificationSummary(
            key_type=key_type,
            total=len(items),
            by_kind=dict(Counter(item.kind for item in items)),
            by_locale=dict(Counter(item.locale_label for item in items)),
            generated_at=datetime.now(timezone.utc),
        )
        return cls(summary=summary, discrepancies=items)

    def has_issues(self) -> bool:
        return self.summary.total > 0

    def iter_all_discrepancies(self) -> Iterable[Discrepancy]:
        yield from self.discrepancies

    def for_locale(self, tag: str) -> tuple[Discrepancy, ...]:
        return tuple(item for item in self.discrepancies if item.locale_label == tag)
