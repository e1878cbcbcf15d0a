"""Postgres type OIDs and their catalog type names."""

from __future__ import annotations

PG_TYPE_NAMES: dict[int, str] = {
    16: "BOOL",
    17: "BYTEA",
    18: "CHAR",
    19: "NAME",
    20: "INT8",
    21: "INT2",
    23: "INT4",
    25: "TEXT",
    26: "OID",
    114: "JSON",
    142: "XML",
    199: "_JSON",
    700: "FLOAT4",
    701: "FLOAT8",
    790: "MONEY",
    1000: "_BOOL",
    1001: "_BYTEA",
    1005: "_INT2",
    1007: "_INT4",
    1009: "_TEXT",
    1014: "_BPCHAR",
    1015: "_VARCHAR",
    1016: "_INT8",
    1021: "_FLOAT4",
    1022: "_FLOAT8",
    1042: "BPCHAR",
    1043: "VARCHAR",
    1082: "DATE",
    1083: "TIME",
    1114: "TIMESTAMP",
    1115: "_TIMESTAMP",
    1182: "_DATE",
    1184: "TIMESTAMPTZ",
    1185: "_TIMESTAMPTZ",
    1186: "INTERVAL",
    1231: "_NUMERIC",
    1266: "TIMETZ",
    1700: "NUMERIC",
    2950: "UUID",
    2951: "_UUID",
    3802: "JSONB",
    3807: "_JSONB",
}


def pg_type_name(type_code: object) -> str:
    """Return the catalog name for an OID; unknown OIDs map to their decimal text."""
    if isinstance(type_code, int) and type_code in PG_TYPE_NAMES:
        return PG_TYPE_NAMES[type_code]
    return str(type_code)
