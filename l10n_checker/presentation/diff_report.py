"""Report generators for catalog discrepancies."""
from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from l10n_checker.domain.models import Discrepancy
from l10n_checker.domain.results import VerificationReport

COLUMNS = ["kind", "key_type", "locale", "base_name", "key", "message"]


def discrepancies_to_rows(discrepancies: Sequence[Discrepancy]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in discrepancies:
        rows.append(
            {
                "kind": item.kind.value,
                "key_type": item.key_type,
                "locale": item.locale_label,
                "base_name": item.base_name or "",
                "key": item.key,
                "message": item.message,
            }
        )
    return rows


def discrepancies_to_frame(discrepancies: Sequence[Discrepancy]) -> pd.DataFrame:
    return pd.DataFrame(discrepancies_to_rows(discrepancies), columns=COLUMNS)


def render_csv(discrepancies: Sequence[Discrepancy]) -> bytes:
    rows = discrepancies_to_rows(discrepancies)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS)
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(report: VerificationReport) -> str:
    if not report.has_issues():
        return "<p>No discrepancies detected.</p>"
    return discrepancies_to_frame(report.discrepancies).to_html(index=False, escape=True)
