"""Catalog sources backed by memory, ``.properties`` files or spreadsheets."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import pandas as pd

from l10n_checker.config import SETTINGS
from l10n_checker.domain.models import ActualKeySet, LocaleValue
from l10n_checker.domain.repositories import CatalogSource
from l10n_checker.infrastructure.parsing.properties import read_properties
from l10n_checker.infrastructure.parsing.utils import ensure_bytes

logger = logging.getLogger(__name__)


class InMemoryCatalogSource(CatalogSource):
    """Catalogs held as ``{base_name: {locale_tag: keys}}``."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, Iterable[str]]]) -> None:
        self._catalogs = {
            base_name: {tag: frozenset(keys) for tag, keys in by_locale.items()}
            for base_name, by_locale in catalogs.items()
        }

    def resolve(self, base_name: str, locale: LocaleValue, charset: str) -> ActualKeySet:
        keys = self._catalogs.get(base_name, {}).get(locale.tag)
        if keys is None:
            return ActualKeySet.absent(base_name, locale, charset)
        return ActualKeySet.present(base_name, locale, charset, keys)


class FileSystemCatalogSource(CatalogSource):
    """Resolves ``com.acme.Messages`` to ``com/acme/Messages_<locale>.properties``.

    Every file on the locale's candidate chain contributes its keys, so a
    ``fr_FR`` catalog inherits the keys of its ``fr`` parent. Roots are
    searched in order and the first root holding a candidate wins for it.
    """

    def __init__(self, roots: Sequence[Path] | Path, extension: str | None = None) -> None:
        if isinstance(roots, (str, Path)):
            roots = [roots]
        self._roots = tuple(Path(root) for root in roots)
        self._extension = extension or SETTINGS.catalog_extension

    def candidate_paths(self, base_name: str, locale: LocaleValue) -> list[Path]:
        relative = Path(*base_name.split("."))
        paths: list[Path] = []
        for suffix in locale.candidates():
            name = f"{relative.name}_{suffix}{self._extension}"
            for root in self._roots:
                path = root / relative.parent / name
                if path.is_file():
                    paths.append(path)
                    break
        return paths

    def resolve(self, base_name: str, locale: LocaleValue, charset: str) -> ActualKeySet:
        if not base_name:
            raise ValueError("Catalog base name must not be empty")
        paths = self.candidate_paths(base_name, locale)
        if not paths:
            logger.debug("No catalog file for %s in locale %s", base_name, locale)
            return ActualKeySet.absent(base_name, locale, charset)

        keys: set[str] = set()
        for path in paths:
            logger.debug("Reading catalog %s with charset %s", path, charset)
            keys.update(read_properties(path, charset))
        return ActualKeySet.present(base_name, locale, charset, keys)


class ExcelCatalogSource(CatalogSource):
    """Spreadsheet catalogs: one sheet per base name, one column per locale.

    The first column of a sheet holds the keys. A key is present for a
    locale when its cell in that locale's column is not blank.
    """

    def __init__(self, source: BytesIO | Path | bytes) -> None:
        self._source = ensure_bytes(source)

    def _read_sheets(self) -> dict[str, pd.DataFrame]:
        return pd.read_excel(
            BytesIO(self._source),
            sheet_name=None,
            engine="openpyxl",
            dtype=str,
            keep_default_na=False,
        )

    @staticmethod
    def _pick_sheet(sheets: Mapping[str, pd.DataFrame], base_name: str) -> pd.DataFrame | None:
        for name in (base_name, base_name.rsplit(".", 1)[-1]):
            if name in sheets:
                return sheets[name]
        return None

    @staticmethod
    def _pick_column(df: pd.DataFrame, locale: LocaleValue) -> str | None:
        columns = {str(column).strip(): column for column in df.columns[1:]}
        for tag in (locale.tag, locale.language):
            if tag in columns:
                return columns[tag]
        return None

    def resolve(self, base_name: str, locale: LocaleValue, charset: str) -> ActualKeySet:
        df = self._pick_sheet(self._read_sheets(), base_name)
        if df is None or len(df.columns) == 0:
            logger.debug("No sheet for %s in workbook", base_name)
            return ActualKeySet.absent(base_name, locale, charset)
        column = self._pick_column(df, locale)
        if column is None:
            logger.debug("No column for locale %s in sheet %s", locale, base_name)
            return ActualKeySet.absent(base_name, locale, charset)

        key_column = df.columns[0]
        keys = df[key_column].astype(str).str.strip()
        values = df[column].astype(str).str.strip()
        present = keys[(keys != "") & (values != "")]
        return ActualKeySet.present(base_name, locale, charset, present.tolist())
