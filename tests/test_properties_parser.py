from pathlib import Path

from l10n_checker.infrastructure.parsing.properties import parse_properties, read_properties


def test_separators_and_comments():
    text = "\n".join(
        [
            "# comment",
            "! another comment",
            "",
            "RED=Rouge",
            "BLUE : Bleu",
            "GREEN Vert",
            "   INDENTED=yes",
            "EMPTY=",
            "BARE",
        ]
    )

    entries = parse_properties(text)

    assert entries == {
        "RED": "Rouge",
        "BLUE": "Bleu",
        "GREEN": "Vert",
        "INDENTED": "yes",
        "EMPTY": "",
        "BARE": "",
    }


def test_continuation_lines_are_joined():
    text = "LONG=first \\\n    second \\\n    third\nNEXT=value\n"

    entries = parse_properties(text)

    assert entries == {"LONG": "first second third", "NEXT": "value"}


def test_escaped_trailing_backslash_is_not_a_continuation():
    entries = parse_properties("PATH=C:\\\\\nOTHER=x\n")

    assert entries == {"PATH": "C:\\", "OTHER": "x"}


def test_escapes_in_keys_and_values():
    entries = parse_properties("key\\ with\\:colon=caf\\u00e9\\tbar\n")

    assert entries == {"key with:colon": "café\tbar"}


def test_read_properties_decodes_with_charset(tmp_path: Path):
    path = tmp_path / "colors_fr.properties"
    path.write_bytes("RED=Rouge\nWHITE=Blanc cassé\n".encode("iso-8859-1"))

    entries = read_properties(path, "ISO-8859-1")

    assert entries["WHITE"] == "Blanc cassé"


def test_only_cr_and_lf_end_lines():
    text = "GREETING=Hello\fWorld\rWAIT=Loading\x85 please\r\nSEP=a b\n"

    entries = parse_properties(text)

    assert entries == {
        "GREETING": "Hello\fWorld",
        "WAIT": "Loading\x85 please",
        "SEP": "a b",
    }
