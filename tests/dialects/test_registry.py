import dataclasses
import threading

import pytest

from dialectkit import (
    AdsDialect,
    DatabaseProduct,
    DialectCapabilities,
    DialectConfigurationError,
    GenericDialect,
    OracleDialect,
    PostgresDialect,
    StaticMetadata,
    dialect_for_metadata,
    get_dialect,
)


def test_get_dialect_by_product_value():
    assert isinstance(get_dialect("oracle"), OracleDialect)
    assert isinstance(get_dialect(DatabaseProduct.ADS), AdsDialect)


def test_get_dialect_by_reported_product_name():
    assert isinstance(get_dialect("Advantage Database Server"), AdsDialect)
    assert isinstance(get_dialect("DB2/LINUXX8664"), GenericDialect)


def test_dialect_for_metadata_picks_product():
    dialect = dialect_for_metadata(StaticMetadata("PostgreSQL", product_version="16.2"))
    assert isinstance(dialect, PostgresDialect)
    assert dialect.metadata.product_version == "16.2"


def test_metadata_probing_adjusts_capabilities():
    metadata = StaticMetadata("Oracle", read_only=True, max_column_name_length=128)
    dialect = dialect_for_metadata(metadata)
    assert dialect.capabilities.allows_ddl is False
    assert dialect.capabilities.max_column_name_length == 128


def test_capability_overrides_reject_unknown_flags():
    with pytest.raises(DialectConfigurationError):
        get_dialect("oracle", supports_time_travel=True)


def test_capabilities_are_immutable():
    dialect = get_dialect("ads")
    with pytest.raises(dataclasses.FrozenInstanceError):
        dialect.capabilities.allows_as = True  # type: ignore[misc]
    with pytest.raises(AttributeError):
        dialect.identifier_quote = "`"  # type: ignore[misc]


def test_allows_order_by_alias_follows_requires_order_by_alias():
    assert DialectCapabilities(requires_order_by_alias=True).allows_order_by_alias is True
    assert DialectCapabilities().allows_order_by_alias is False


def test_generic_dialect_defaults():
    dialect = GenericDialect()
    assert dialect.allows_as is True
    assert dialect.identifier_quote == '"'
    assert dialect.generate_regular_expression("c", "a") is None
    assert dialect.generate_order_by_nulls("x", True, True) == "CASE WHEN x IS NULL THEN 1 ELSE 0 END, x ASC"


def test_dialect_shared_between_threads():
    dialect = get_dialect("ads")
    results: list[str | None] = []
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(50):
            value = dialect.generate_regular_expression("col", "(?ic)^a\\Q.\\E")
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 400
    assert set(results) == {"REGEXP_LIKE(col, '^a\\.', 'ic')"}
