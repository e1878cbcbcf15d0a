from __future__ import annotations

import os
import sys
import time

import psycopg2
from dotenv import load_dotenv

from dynrows import decode_to_mappings, decode_to_sequences
from dynrows.db.psycopg2_cursor import Psycopg2Cursor


def build_table_name() -> str:
    return f"dynrows_smoke_{int(time.time() * 1000)}"


def run() -> None:
    load_dotenv()
    dsn = os.getenv("DYNROWS_POSTGRES_DSN")
    if not dsn:
        raise RuntimeError("Missing DYNROWS_POSTGRES_DSN")
    conn = psycopg2.connect(dsn)
    conn.autocommit = True
    table = build_table_name()
    try:
        with conn.cursor() as cur:
            cur.execute(
                f"""
                CREATE TEMP TABLE {table} (
                    id SERIAL PRIMARY KEY,
                    name TEXT NOT NULL,
                    price NUMERIC(10, 2),
                    ref UUID,
                    active BOOLEAN,
                    tags TEXT[],
                    scores NUMERIC[],
                    counts INTEGER[],
                    flags BOOLEAN[]
                )
                """
            )
            cur.execute(
                f"""
                INSERT INTO {table} (name, price, ref, active, tags, scores, counts, flags)
                VALUES
                    ('widget', 12.50, '123e4567-e89b-12d3-a456-426614174000', true,
                     '{{"a b",c,NULL}}', '{{1.5,2}}', '{{1,2,3}}', '{{t,f}}'),
                    ('empty', NULL, NULL, false, '{{}}', '{{}}', '{{}}', '{{}}')
                """
            )
        with conn.cursor() as pg_cursor:
            adapter = Psycopg2Cursor(pg_cursor)
            pg_cursor.execute(f"SELECT * FROM {table} ORDER BY id")
            mappings = decode_to_mappings(adapter)
        with conn.cursor() as pg_cursor:
            adapter = Psycopg2Cursor(pg_cursor)
            pg_cursor.execute(f"SELECT id, name, tags FROM {table} ORDER BY id")
            sequences = decode_to_sequences(adapter)
        with conn.cursor() as cur:
            cur.execute(f"DROP TABLE {table}")
    finally:
        conn.close()

    first = mappings[0]
    assert first["price"] == 12.5, first
    assert first["ref"] == "123e4567-e89b-12d3-a456-426614174000", first
    assert first["tags"] == ["a b", "c", None], first
    assert first["scores"] == [1.5, 2.0], first
    assert first["counts"] == [1, 2, 3], first
    assert first["flags"] == [True, False], first
    assert mappings[1]["tags"] == [], mappings[1]
    assert len(sequences) == 2 and all(len(row) == 3 for row in sequences), sequences
    print(f"dynrows decode ok: rows={len(mappings)}, first={first}, sequences={sequences}")


if __name__ == "__main__":
    try:
        run()
    except Exception as exc:  # pragma: no cover
        print(f"dynrows Postgres smoke test failed: {exc}", file=sys.stderr)
        raise
