from pathlib import Path

import pandas as pd
import pytest

from l10n_checker.domain.models import LocaleValue
from l10n_checker.infrastructure.repositories.catalog_repositories import (
    ExcelCatalogSource,
    FileSystemCatalogSource,
    InMemoryCatalogSource,
)


def write_catalog(root: Path, relative: str, text: str, encoding: str = "utf-8") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode(encoding))
    return path


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    root = tmp_path / "resources"
    write_catalog(root, "com/acme/Colors_fr.properties", "RED=Rouge\nBLUE=Bleu\n")
    write_catalog(root, "com/acme/Colors_fr_CA.properties", "GREEN=Vert\n")
    write_catalog(root, "com/acme/Colors_de.properties", "# nothing translated yet\n")
    return root


def test_in_memory_catalog_distinguishes_absent_from_empty():
    source = InMemoryCatalogSource({"colors": {"en": ["RED"], "fr": []}})

    assert source.resolve("colors", LocaleValue("de"), "UTF-8").is_absent
    empty = source.resolve("colors", LocaleValue("fr"), "UTF-8")
    assert not empty.is_absent
    assert empty.keys == frozenset()
    assert source.resolve("other", LocaleValue("en"), "UTF-8").is_absent


def test_filesystem_catalog_resolves_dotted_base_name(catalog_root: Path):
    source = FileSystemCatalogSource(catalog_root)

    actual = source.resolve("com.acme.Colors", LocaleValue("fr"), "UTF-8")

    assert actual.keys == frozenset({"RED", "BLUE"})
    assert actual.base_name == "com.acme.Colors"
    assert actual.charset == "UTF-8"


def test_filesystem_catalog_merges_parent_chain(catalog_root: Path):
    source = FileSystemCatalogSource([catalog_root])

    actual = source.resolve("com.acme.Colors", LocaleValue("fr", "CA"), "UTF-8")

    assert actual.keys == frozenset({"RED", "BLUE", "GREEN"})
    assert [path.name for path in source.candidate_paths("com.acme.Colors", LocaleValue("fr", "CA"))] == [
        "Colors_fr_CA.properties",
        "Colors_fr.properties",
    ]


def test_filesystem_catalog_without_file_is_absent(catalog_root: Path):
    source = FileSystemCatalogSource(catalog_root)

    assert source.resolve("com.acme.Colors", LocaleValue("it"), "UTF-8").is_absent


def test_filesystem_catalog_with_only_comments_is_empty(catalog_root: Path):
    source = FileSystemCatalogSource(catalog_root)

    actual = source.resolve("com.acme.Colors", LocaleValue("de"), "UTF-8")

    assert not actual.is_absent
    assert actual.keys == frozenset()


def test_filesystem_catalog_searches_roots_in_order(tmp_path: Path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    write_catalog(first, "Messages_en.properties", "HELLO=Hello\n")
    write_catalog(second, "Messages_en.properties", "BYE=Bye\n")

    actual = FileSystemCatalogSource([first, second]).resolve("Messages", LocaleValue("en"), "UTF-8")

    assert actual.keys == frozenset({"HELLO"})


def test_filesystem_catalog_rejects_unknown_charset(catalog_root: Path):
    source = FileSystemCatalogSource(catalog_root)

    with pytest.raises(LookupError):
        source.resolve("com.acme.Colors", LocaleValue("fr"), "no-such-charset")


@pytest.fixture
def workbook(tmp_path: Path) -> Path:
    path = tmp_path / "catalogs.xlsx"
    colors = pd.DataFrame(
        {
            "key": ["RED", "BLUE", "GREEN"],
            "en": ["Red", "Blue", "Green"],
            "fr": ["Rouge", "", "Vert"],
            "de": ["", "", ""],
        }
    )
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        colors.to_excel(writer, sheet_name="Colors", index=False)
    return path


def test_excel_catalog_reads_locale_column(workbook: Path):
    source = ExcelCatalogSource(workbook)

    assert source.resolve("Colors", LocaleValue("en"), "UTF-8").keys == frozenset({"RED", "BLUE", "GREEN"})
    assert source.resolve("Colors", LocaleValue("fr"), "UTF-8").keys == frozenset({"RED", "GREEN"})


def test_excel_catalog_falls_back_to_language_column(workbook: Path):
    source = ExcelCatalogSource(workbook.read_bytes())

    actual = source.resolve("com.acme.Colors", LocaleValue("fr", "BE"), "UTF-8")

    assert actual.keys == frozenset({"RED", "GREEN"})


def test_excel_catalog_blank_column_is_empty_and_unknown_is_absent(workbook: Path):
    source = ExcelCatalogSource(workbook)

    assert source.resolve("Colors", LocaleValue("de"), "UTF-8").keys == frozenset()
    assert source.resolve("Colors", LocaleValue("it"), "UTF-8").is_absent
    assert source.resolve("Shapes", LocaleValue("en"), "UTF-8").is_absent


def test_filesystem_catalog_keeps_control_characters_inside_values(tmp_path: Path):
    root = tmp_path / "resources"
    root.mkdir()
    (root / "Messages_en.properties").write_bytes(b"WAIT=Loading\x85 please\nDONE=Done\n")

    actual = FileSystemCatalogSource(root).resolve("Messages", LocaleValue("en"), "ISO-8859-1")

    assert actual.keys == frozenset({"WAIT", "DONE"})
