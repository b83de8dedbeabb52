from dialectkit import PostgresDialect


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.quote_qualified("public", "users") == '"public"."users"'


def test_postgres_inline_uses_values():
    sql = PostgresDialect().generate_inline(
        ["id", "name"], ["Integer", "String"], [["1", "a"], ["2", "b"]]
    )
    assert sql == "SELECT * FROM (VALUES (1, 'a'), (2, 'b')) AS \"t\" (\"id\", \"name\")"


def test_postgres_regular_expression_embeds_options():
    dialect = PostgresDialect()
    assert dialect.generate_regular_expression("col", "(?im)^foo") == "col ~ '(?in)^foo'"
    assert dialect.generate_regular_expression("col", "abc") == "col ~ 'abc'"


def test_postgres_order_by_nulls_is_ansi():
    assert PostgresDialect().generate_order_by_nulls("x", True, False) == "x ASC NULLS FIRST"
