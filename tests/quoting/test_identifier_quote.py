import logging

import pytest

from dialectkit import AdsDialect, DialectConfigurationError, StaticMetadata
from dialectkit.quoting import quote_identifier, quote_qualified, resolve_identifier_quote


@pytest.mark.parametrize("reported", [None, "", " "])
def test_missing_quote_uses_fallback(reported):
    assert resolve_identifier_quote(reported, "'") == "'"


def test_reported_quote_wins():
    assert resolve_identifier_quote("`", '"') == "`"


def test_empty_fallback_rejected():
    with pytest.raises(DialectConfigurationError):
        resolve_identifier_quote(None, "")


def test_fallback_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="dialectkit.quoting")
    dialect = AdsDialect(StaticMetadata("Advantage Database Server", identifier_quote_string=""))
    assert dialect.identifier_quote == "'"
    assert any("using fallback" in record.message for record in caplog.records)


def test_quote_identifier_doubles_embedded_quotes():
    assert quote_identifier('"', 'a"b') == '"a""b"'


def test_quote_identifier_leaves_quoted_names():
    assert quote_identifier('"', '"already"') == '"already"'


def test_quote_qualified_skips_empty_parts():
    assert quote_qualified('"', "sales", None, "fact") == '"sales"."fact"'
    with pytest.raises(ValueError):
        quote_qualified('"', None, "")
