"""
DDL state machine tests

Run with:
    pytest tests/test_ddl_state_machine.py -v
"""

import logging

import pytest

from ddl_json.parser.ddl_state_machine import (
    DDLStateMachine,
    InvalidParserStateError,
    ParserState,
    parse_ddl,
)
from ddl_json.types.ddl_types import SequenceRecord, TableRecord
from ddl_json.utils.compress import ABSENT


BASIC_DDL = """\
CREATE SCHEMA s;
CREATE TABLE s.t (
    id int8 NOT NULL,
    name text,
);
COMMENT ON COLUMN s.t.name IS 'the name';
"""


# ============================================================================
# BASIC FLOW
# ============================================================================

class TestBasicFlow:

    def test_single_table_with_comment(self):
        assert parse_ddl(BASIC_DDL) == [{
            "schema": "s",
            "type": "table",
            "name": "t",
            "columns": [
                {"name": "id", "type": "int8", "constraints": ["NOT NULL"]},
                {"name": "name", "type": "text"},
            ],
            "comments": {"name": "the name"},
        }]

    def test_empty_input_is_absent(self):
        assert parse_ddl("") is ABSENT
        assert parse_ddl("\n   \n-- only a comment\n") is ABSENT

    def test_unrecognized_statements_are_ignored(self):
        ddl = "SET statement_timeout = 0;\nALTER TABLE s.t OWNER TO postgres;\nSELECT 1;\n"
        assert parse_ddl(ddl) is ABSENT

    def test_schema_persists_until_changed(self):
        ddl = (
            "CREATE SCHEMA a;\n"
            "CREATE SEQUENCE a.seq1\n"
            "CREATE SCHEMA b;\n"
            "CREATE SEQUENCE b.seq2\n"
        )
        assert parse_ddl(ddl) == [
            {"schema": "a", "type": "sequence", "name": "seq1"},
            {"schema": "b", "type": "sequence", "name": "seq2"},
        ]

    def test_records_follow_closing_order(self):
        ddl = (
            "CREATE TABLE s.first (\n"
            "    a int,\n"
            ");\n"
            "CREATE SEQUENCE s.seq\n"
            "CREATE TABLE s.second (\n"
            "    b int,\n"
            ");\n"
        )
        names = [record["name"] for record in parse_ddl(ddl)]
        assert names == ["first", "seq", "second"]

    def test_table_without_body_keeps_identity_fields(self):
        ddl = "CREATE SCHEMA s;\nCREATE TABLE s.t (\n);\n"
        assert parse_ddl(ddl) == [{"schema": "s", "type": "table", "name": "t"}]

    def test_keyword_named_columns_are_kept(self):
        ddl = (
            "CREATE TABLE s.t (\n"
            "    id int8 NOT NULL,\n"
            "    comment text,\n"
            "    exclude boolean,\n"
            "    CONSTRAINT t_check CHECK ((id > 0)),\n"
            ");\n"
        )
        assert parse_ddl(ddl)[0]["columns"] == [
            {"name": "id", "type": "int8", "constraints": ["NOT NULL"]},
            {"name": "comment", "type": "text"},
            {"name": "exclude", "type": "boolean"},
        ]

    def test_unclosed_table_is_not_emitted(self):
        ddl = "CREATE TABLE s.t (\n    id int8 NOT NULL,\n"
        assert parse_ddl(ddl) is ABSENT


# ============================================================================
# SAMPLE DUMP
# ============================================================================

class TestSampleDump:

    def test_full_sample(self, sample_ddl):
        result = parse_ddl(sample_ddl)

        assert result[0] == {
            "schema": "shop",
            "type": "sequence",
            "name": "orders_id_seq",
            "trailingComment": "order ids",
        }
        assert result[1] == {
            "schema": "shop",
            "type": "table",
            "name": "customers",
            "columns": [
                {"name": "id", "type": "int8", "constraints": ["NOT NULL"]},
                {"name": "email", "type": "character varying(255)", "constraints": ["NOT NULL"]},
                {"name": "nickname", "type": "text", "trailingComment": "display name"},
            ],
            "constraints": [
                {"type": "primary_key", "indexName": "customers_pkey", "columns": ["id"]},
            ],
            "comments": {"email": "customer's login"},
            "trailingComment": "registered customers",
        }
        assert result[2] == {
            "schema": "shop",
            "type": "table",
            "name": "orders",
            "columns": [
                {"name": "id", "type": "int8", "constraints": ["NOT NULL"]},
                {"name": "customer_id", "type": "int8", "constraints": ["NOT NULL"]},
                {"name": "amount", "type": "numeric(10,2)", "defaultValue": "0"},
                {"name": "created_at", "type": "timestamp without time zone", "defaultValue": "now()"},
            ],
            "constraints": [
                {"type": "primary_key", "indexName": "orders_pkey", "columns": ["id"]},
                {
                    "type": "foreign_key",
                    "indexName": "orders_customer_fk",
                    "columns": ["customer_id"],
                    "rule": "REFERENCES shop.customers(id) ON DELETE CASCADE",
                },
            ],
            "indexes": [
                {"name": "orders_uq", "kind": "unique"},
                {"name": "orders_created_idx", "kind": "btree"},
            ],
            "comments": {"amount": "order total"},
        }
        assert len(result) == 3

    def test_unknown_table_comment_is_reported(self, sample_ddl, caplog):
        machine = DDLStateMachine()
        with caplog.at_level(logging.WARNING, logger="ddl_state_machine"):
            result = machine.parse(sample_ddl)

        assert machine.warnings == ["Comment references unknown table 'invoices'"]
        assert "unknown table 'invoices'" in caplog.text
        for record in result:
            assert "total" not in record.get("comments", {})


# ============================================================================
# COMMENT RESOLUTION
# ============================================================================

class TestCommentResolution:

    def test_comment_before_table_is_dropped(self):
        ddl = (
            "COMMENT ON COLUMN s.t.a IS 'early';\n"
            "CREATE TABLE s.t (\n"
            "    a int,\n"
            ");\n"
        )
        machine = DDLStateMachine()
        result = machine.parse(ddl)
        assert "comments" not in result[0]
        assert len(machine.warnings) == 1

    def test_comment_inside_table_body(self):
        ddl = (
            "CREATE TABLE s.t (\n"
            "    a int,\n"
            "    COMMENT ON COLUMN s.t.a IS 'inline';\n"
            ");\n"
        )
        assert parse_ddl(ddl)[0]["comments"] == {"a": "inline"}

    def test_comment_resolves_by_table_name_regardless_of_schema(self):
        ddl = (
            "CREATE TABLE s.t (\n"
            "    a int,\n"
            ");\n"
            "COMMENT ON COLUMN t.a IS 'no schema';\n"
        )
        assert parse_ddl(ddl)[0]["comments"] == {"a": "no schema"}

    def test_colliding_table_names_last_write_wins(self):
        ddl = (
            "CREATE TABLE a.t (\n"
            "    x int,\n"
            ");\n"
            "CREATE TABLE b.t (\n"
            "    y int,\n"
            ");\n"
            "COMMENT ON COLUMN a.t.x IS 'goes to the later table';\n"
        )
        first, second = parse_ddl(ddl)
        assert "comments" not in first
        assert second["comments"] == {"x": "goes to the later table"}


# ============================================================================
# STATE HANDLING
# ============================================================================

class TestStateHandling:

    def test_parse_records_returns_dataclasses(self):
        machine = DDLStateMachine()
        records = machine.parse_records(BASIC_DDL)
        assert isinstance(records[0], TableRecord)
        assert records[0].columns[0].constraints == ["NOT NULL"]
        assert machine.current_table is None
        assert machine.state is ParserState.NONE

    def test_sequence_record_type(self):
        records = DDLStateMachine().parse_records("CREATE SEQUENCE s.q\n")
        assert records == [SequenceRecord(schema="", name="q")]

    def test_state_is_reset_between_calls(self):
        machine = DDLStateMachine()
        machine.parse("CREATE TABLE s.t (\n    a int,\n")
        assert machine.state is ParserState.TABLE

        result = machine.parse("CREATE SEQUENCE s.q\n")
        assert result == [{"type": "sequence", "name": "q"}]
        assert machine.table_lookup == {}

    def test_table_level_lines_are_ignored_at_top_level(self):
        ddl = "CONSTRAINT t_pkey PRIMARY KEY (id)\nid int8 NOT NULL,\n);\n"
        assert parse_ddl(ddl) is ABSENT

    def test_invalid_state_is_fatal(self):
        machine = DDLStateMachine()
        machine._reset()
        machine.state = "BROKEN"
        with pytest.raises(InvalidParserStateError):
            machine._feed("CREATE SCHEMA s;", None)
