import logging

from dialectkit import AdsDialect
from dialectkit.utils import correlation_scope
from dialectkit.utils.logging import DialectContextFilter, get_correlation_id, get_logger


def test_correlation_scope_sets_and_restores_id():
    assert get_correlation_id() == "-"
    with correlation_scope("stmt-1") as token:
        assert token == "stmt-1"
        assert get_correlation_id() == "stmt-1"
        with correlation_scope() as inner:
            assert get_correlation_id() == inner != "stmt-1"
        assert get_correlation_id() == "stmt-1"
    assert get_correlation_id() == "-"


def test_get_logger_is_namespaced():
    assert get_logger("tests.logging").name == "dialectkit.tests.logging"


def test_context_filter_stamps_dialect_and_correlation_id():
    context_filter = DialectContextFilter()
    dialect_record = logging.LogRecord("dialectkit.dialects.ads", logging.INFO, __file__, 1, "msg", None, None)
    helper_record = logging.LogRecord("dialectkit.quoting", logging.INFO, __file__, 1, "msg", None, None)
    with correlation_scope("stmt-2"):
        assert context_filter.filter(dialect_record) is True
        context_filter.filter(helper_record)
    assert dialect_record.dialect == "ads"
    assert dialect_record.correlation_id == "stmt-2"
    assert helper_record.dialect == "-"


def test_untranslatable_regex_is_logged(caplog):
    dialect = AdsDialect()
    caplog.set_level(logging.DEBUG, logger=dialect.logger.name)
    assert dialect.generate_regular_expression("col", "[unclosed") is None
    records = [record for record in caplog.records if record.name == dialect.logger.name]
    assert any("not pushed down" in record.message for record in records)
    assert any(getattr(record, "pattern", None) == "[unclosed" for record in records)
