"""
Shared pytest fixtures for registry tests.

Builds an in-memory DuckDB database with the registry schemas and a small
set of electors covering the complete, partial and dangling-code cases.
"""

import duckdb
import pytest

from api.lib.executor import DuckDBQueryExecutor

REGISTRY_DDL = [
    "CREATE SCHEMA re",
    "CREATE SCHEMA instrumentos",
    "CREATE SCHEMA mc",
    """CREATE TABLE re.ac (
        nacionalidad VARCHAR, cedula BIGINT,
        primer_apellido VARCHAR, segundo_apellido VARCHAR,
        primer_nombre VARCHAR, segundo_nombre VARCHAR,
        fecha_nacimiento_4 VARCHAR, status_objecion INTEGER)""",
    "CREATE TABLE re.objecion (status INTEGER, descripcion VARCHAR)",
    """CREATE TABLE instrumentos.cuaderno_actual2 (
        co_nacionalidad VARCHAR, nu_cedula BIGINT,
        nu_mesa INTEGER, nu_pagina INTEGER, nu_renglon INTEGER,
        nu_edad_al_evento INTEGER, fe_evento VARCHAR,
        cod_estado INTEGER, cod_municipio INTEGER, cod_parroquia INTEGER,
        nu_centro BIGINT)""",
    """CREATE TABLE re.v_centro_votacion_geografico (
        cod_estado INTEGER, des_estado VARCHAR,
        cod_municipio INTEGER, des_municipio VARCHAR,
        cod_parroquia INTEGER, des_parroquia VARCHAR,
        codigo_nuevo BIGINT, nombre VARCHAR, direccion VARCHAR)""",
    """CREATE TABLE miembros_oes (
        nac VARCHAR, cedula BIGINT, mesa INTEGER, cargo INTEGER, timioes INTEGER,
        centrocap VARCHAR, tallerdesde VARCHAR, tallerhasta VARCHAR, horario VARCHAR)""",
    "CREATE TABLE cargos_miembros_oes (tipo_oes INTEGER, cod_cargo INTEGER, descripcion_cargo VARCHAR)",
    "CREATE TABLE tipos_oes (tipo_oes INTEGER, descripcion VARCHAR)",
    "CREATE TABLE mc.centro_capacitacion (codigo VARCHAR, nombre VARCHAR, direccion VARCHAR)",
    """CREATE TABLE re.movimiento (
        nacionalidad VARCHAR, cedula_number BIGINT, cierre INTEGER, id_lote INTEGER,
        tipo_movimiento INTEGER, status_proceso_mov INTEGER, fecha_proceso_mov VARCHAR)""",
    "CREATE TABLE re.cierre (codigo INTEGER, nombre_corto VARCHAR)",
    "CREATE TABLE re.tipo_movimiento (tipo_movimiento INTEGER, descripcion VARCHAR)",
    "CREATE TABLE re.status_proceso_mov (codigo INTEGER, descripcion VARCHAR)",
    """CREATE TABLE re.v_elector_busqueda (
        nacionalidad VARCHAR, cedula BIGINT,
        primer_nombre VARCHAR, segundo_nombre VARCHAR,
        primer_apellido VARCHAR, segundo_apellido VARCHAR,
        fecha_nacimiento VARCHAR, codigo_centro VARCHAR)""",
]

# V-28524669: person only, no roll / geography / station role
# V-12345678: complete record
# E-81234567: roll entry whose voting center has no geography row
# V-5555555:  roll entry missing the parish code, no objection row
AC_ROWS = [
    ("V", 28524669, "PEREZ", "GOMEZ", "MARIA", "JOSE", "19990512", 0),
    ("V", 12345678, "RODRIGUEZ", "LOPEZ", "CARLOS", "ALBERTO", "19800101", 0),
    ("E", 81234567, "SILVA", None, "ANA", None, "1975/3/9", 2),
    ("V", 5555555, "MARQUEZ", "DIAZ", "LUIS", None, None, None),
]

OBJECION_ROWS = [
    (0, "SIN OBJECION"),
    (2, "FALLECIDO"),
]

CUADERNO_ROWS = [
    ("V", 12345678, 3, 12, 7, 44, "2024-07-28 00:00:00", 13, 8, 1, 130801001),
    ("E", 81234567, 1, 2, 3, 49, "20240728", 13, 8, 1, 999999999),
    ("V", 5555555, 2, 5, 9, 61, "2024-07-28", 1, 1, None, 10101001),
]

GEO_ROWS = [
    (13, "EDO. MIRANDA", 8, "MUN. PLAZA", 1, "PQ. GUARENAS", 130801001,
     "U.E. JOSE FELIX RIBAS", "CALLE BOLIVAR, GUARENAS"),
]

MIEMBROS_ROWS = [
    ("V", 12345678, 3, 1, 10, "C-101", "15062024", "19062024", "08001200"),
]

CARGOS_ROWS = [
    (10, 1, "PRESIDENTE"),
    (10, 2, "SECRETARIO"),
]

TIPOS_ROWS = [
    (10, "MIEMBRO DE MESA"),
]

CENTRO_CAP_ROWS = [
    ("C-101", "LICEO ANDRES BELLO", "AV. PRINCIPAL, GUARENAS"),
]

MOVIMIENTO_ROWS = [
    ("V", 12345678, 202301, 55, 1, 1, "2023-02-10"),
    ("V", 12345678, 202405, 71, 2, 9, "2024-05-03"),
]

CIERRE_ROWS = [
    (202301, "ENE-2023"),
    (202405, "MAY-2024"),
]

TIPO_MOVIMIENTO_ROWS = [
    (1, "INSCRIPCION"),
    (2, "CAMBIO DE CENTRO"),
]

STATUS_ROWS = [
    (1, "PROCESADO"),
]

BUSQUEDA_ROWS = [
    ("V", 28524669, "MARIA", "JOSE", "PEREZ", "GOMEZ", "1999-05-12", None),
    ("V", 12345678, "CARLOS", "ALBERTO", "RODRIGUEZ", "LOPEZ", "1980-01-01", "130801001"),
    ("E", 81234567, "ANA", None, "SILVA", None, "1975-03-09", "999999999"),
    ("V", 22334455, "MARIA", "ELENA", "PEREZ", "ROJAS", "2001-11-30", "130801001"),
]

SEED = {
    "re.ac": AC_ROWS,
    "re.objecion": OBJECION_ROWS,
    "instrumentos.cuaderno_actual2": CUADERNO_ROWS,
    "re.v_centro_votacion_geografico": GEO_ROWS,
    "miembros_oes": MIEMBROS_ROWS,
    "cargos_miembros_oes": CARGOS_ROWS,
    "tipos_oes": TIPOS_ROWS,
    "mc.centro_capacitacion": CENTRO_CAP_ROWS,
    "re.movimiento": MOVIMIENTO_ROWS,
    "re.cierre": CIERRE_ROWS,
    "re.tipo_movimiento": TIPO_MOVIMIENTO_ROWS,
    "re.status_proceso_mov": STATUS_ROWS,
    "re.v_elector_busqueda": BUSQUEDA_ROWS,
}


@pytest.fixture
def registry_conn():
    """In-memory DuckDB connection with the seeded registry."""
    conn = duckdb.connect(database=":memory:")
    for statement in REGISTRY_DDL:
        conn.execute(statement)
    for table, rows in SEED.items():
        placeholders = ", ".join(["?"] * len(rows[0]))
        conn.executemany(f"INSERT INTO {table} VALUES ({placeholders})", rows)
    yield conn
    conn.close()


@pytest.fixture
def executor(registry_conn):
    """DuckDBQueryExecutor over the seeded registry."""
    return DuckDBQueryExecutor(registry_conn)


@pytest.fixture
def person_row():
    """A raw person row as an executor would return it."""
    return {
        "primer_apellido": "PEREZ",
        "segundo_apellido": "GOMEZ",
        "primer_nombre": "MARIA",
        "segundo_nombre": "JOSE",
        "fecha_nacimiento_4": "19990512",
        "status_objecion": 0,
        "descripcion_objecion": "SIN OBJECION",
    }
