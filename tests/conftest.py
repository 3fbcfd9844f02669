import pytest


SAMPLE_DDL = """\
-- PostgreSQL database dump

CREATE SCHEMA shop;

CREATE SEQUENCE shop.orders_id_seq -- order ids
    START WITH 1
    INCREMENT BY 1
    NO MINVALUE
    CACHE 1;

CREATE TABLE shop.customers ( -- registered customers
    id int8 NOT NULL,
    email character varying(255) NOT NULL,
    nickname text, -- display name
    CONSTRAINT customers_pkey PRIMARY KEY (id)
);

CREATE TABLE shop.orders (
    id int8 DEFAULT nextval('shop.orders_id_seq'::regclass) NOT NULL,
    customer_id int8 NOT NULL,
    amount numeric(10,2) DEFAULT 0,
    created_at timestamp without time zone DEFAULT now(),
    CONSTRAINT orders_pkey PRIMARY KEY (id),
    CONSTRAINT orders_customer_fk FOREIGN KEY (customer_id) REFERENCES shop.customers(id) ON DELETE CASCADE,
    CREATE UNIQUE INDEX orders_uq ON shop.orders USING btree (id, customer_id);
    CREATE INDEX orders_created_idx ON shop.orders USING btree (created_at);
    COMMENT ON COLUMN shop.orders.amount IS 'order total';
);

COMMENT ON COLUMN shop.customers.email IS 'customer''s login';
COMMENT ON COLUMN shop.invoices.total IS 'never declared';
"""


@pytest.fixture
def sample_ddl():
    return SAMPLE_DDL


@pytest.fixture
def sample_ddl_file(tmp_path):
    path = tmp_path / "ddl.sql"
    path.write_text(SAMPLE_DDL, encoding="utf-8")
    return path
