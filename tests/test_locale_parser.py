import pytest

from l10n_checker.domain.models import LocaleValue
from l10n_checker.infrastructure.parsing.locale import (
    DefaultLocaleParser,
    LocaleFormatError,
    parse_locale,
)


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("en", LocaleValue("en")),
        ("fr_FR", LocaleValue("fr", "FR")),
        ("en-us", LocaleValue("en", "US")),
        ("de_CH_POSIX", LocaleValue("de", "CH", "POSIX")),
        ("es_419", LocaleValue("es", "419")),
        (" pt_BR ", LocaleValue("pt", "BR")),
    ],
)
def test_parse_valid_identifiers(identifier, expected):
    assert parse_locale(identifier) == expected


@pytest.mark.parametrize("identifier", ["", "   ", "e", "en_", "en_U", "a_b_c_d", "en_US_", "f1"])
def test_parse_rejects_malformed_identifiers(identifier):
    with pytest.raises(LocaleFormatError):
        parse_locale(identifier)


def test_parse_rejects_non_strings():
    with pytest.raises(TypeError):
        DefaultLocaleParser().parse(None)


def test_candidates_run_from_most_specific():
    locale = parse_locale("de_CH_POSIX")

    assert locale.tag == "de_CH_POSIX"
    assert list(locale.candidates()) == ["de_CH_POSIX", "de_CH", "de"]
    assert str(parse_locale("fr")) == "fr"


@pytest.mark.parametrize(
    "identifier, tag",
    [
        ("en", "en"),
        ("fr_FR", "fr_FR"),
        ("de_CH_POSIX", "de_CH_POSIX"),
        ("de__POSIX", "de__POSIX"),
    ],
)
def test_tag_round_trips_through_parser(identifier, tag):
    locale = parse_locale(identifier)

    assert locale.tag == tag
    assert parse_locale(locale.tag) == locale
    assert next(locale.candidates()) == tag


def test_variant_without_country_falls_back_to_language():
    locale = parse_locale("de__POSIX")

    assert locale == LocaleValue("de", "", "POSIX")
    assert list(locale.candidates()) == ["de__POSIX", "de"]
