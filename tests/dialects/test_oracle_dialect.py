from dialectkit import OracleDialect


def test_oracle_order_by_nulls_is_ansi():
    dialect = OracleDialect()
    assert dialect.generate_order_by_nulls("x", True, True) == "x ASC NULLS LAST"
    assert dialect.generate_order_by_nulls("x", False, False) == "x DESC NULLS FIRST"


def test_oracle_order_item_skips_null_handling_for_non_nullable():
    dialect = OracleDialect()
    assert dialect.generate_order_item("x", False, False, True) == "x DESC"
    assert dialect.generate_order_item("x", True, False, True) == "x DESC NULLS LAST"


def test_oracle_inline_uses_dual():
    sql = OracleDialect().generate_inline(["n"], ["Numeric"], [["1.5"], ["2"]])
    assert sql == 'select 1.5 "n" from dual union all select 2 "n" from dual'


def test_oracle_regular_expression():
    dialect = OracleDialect()
    assert dialect.generate_regular_expression("c", "(?cm)^a$") == "REGEXP_LIKE(c, '^a$', 'cm')"


def test_oracle_column_name_limit():
    assert OracleDialect().capabilities.max_column_name_length == 30
