"""
SQL statements and row schemas for the registry sources

Every statement binds DuckDB named parameters ($name). Row schemas list the
columns each statement returns and the scalar type decoded from each.
"""

# Tables (and views) the registry core reads, as <schema>.<table>.
REGISTRY_TABLES = (
    "re.ac",
    "re.objecion",
    "re.v_centro_votacion_geografico",
    "re.v_elector_busqueda",
    "re.movimiento",
    "re.cierre",
    "re.tipo_movimiento",
    "re.status_proceso_mov",
    "instrumentos.cuaderno_actual2",
    "main.miembros_oes",
    "main.cargos_miembros_oes",
    "main.tipos_oes",
    "mc.centro_capacitacion",
)

# ============================================================================
# Identity (person + objection)
# ============================================================================

PERSON_SQL = """
    SELECT
      ac.primer_apellido,
      ac.segundo_apellido,
      ac.primer_nombre,
      ac.segundo_nombre,
      ac.fecha_nacimiento_4,
      ac.status_objecion,
      obj.descripcion AS descripcion_objecion
    FROM re.ac ac
    LEFT JOIN re.objecion obj ON ac.status_objecion = obj.status
    WHERE ac.nacionalidad = $nacionalidad
      AND ac.cedula = $cedula
"""

PERSON_SCHEMA = {
    "primer_apellido": str,
    "segundo_apellido": str,
    "primer_nombre": str,
    "segundo_nombre": str,
    "fecha_nacimiento_4": str,
    "status_objecion": int,
    "descripcion_objecion": str,
}

# ============================================================================
# Roll (cuaderno)
# ============================================================================

ROLL_SQL = """
    SELECT
      nu_mesa,
      nu_pagina,
      nu_renglon,
      nu_edad_al_evento,
      fe_evento,
      cod_estado,
      cod_municipio,
      cod_parroquia,
      nu_centro
    FROM instrumentos.cuaderno_actual2
    WHERE co_nacionalidad = $nacionalidad
      AND nu_cedula = $cedula
"""

ROLL_SCHEMA = {
    "nu_mesa": int,
    "nu_pagina": int,
    "nu_renglon": int,
    "nu_edad_al_evento": int,
    "fe_evento": str,
    "cod_estado": int,
    "cod_municipio": int,
    "cod_parroquia": int,
    "nu_centro": int,
}

# ============================================================================
# Geography
# ============================================================================

GEOGRAPHY_SQL = """
    SELECT
      cod_estado,
      des_estado,
      cod_municipio,
      des_municipio,
      cod_parroquia,
      des_parroquia,
      codigo_nuevo,
      nombre,
      direccion
    FROM re.v_centro_votacion_geografico
    WHERE codigo_nuevo  = $codigo_centro
      AND cod_estado    = $cod_estado
      AND cod_municipio = $cod_municipio
      AND cod_parroquia = $cod_parroquia
"""

GEOGRAPHY_SCHEMA = {
    "des_estado": str,
    "des_municipio": str,
    "des_parroquia": str,
    "nombre": str,
    "direccion": str,
}

# ============================================================================
# Station role (miembro de mesa)
# ============================================================================

STATION_ROLE_SQL = """
    SELECT
      miembro.mesa,
      cargo_miembro.descripcion_cargo,
      miembro.centrocap,
      c_capacitacion.nombre AS nombre_centro_capacitacion,
      miembro.tallerdesde,
      miembro.tallerhasta,
      miembro.horario,
      c_capacitacion.direccion AS direccion_centro_capacitacion
    FROM main.miembros_oes miembro,
         main.cargos_miembros_oes cargo_miembro,
         main.tipos_oes t_oes,
         mc.centro_capacitacion c_capacitacion
    WHERE t_oes.tipo_oes = cargo_miembro.tipo_oes
      AND cargo_miembro.tipo_oes = miembro.timioes
      AND miembro.cargo = cargo_miembro.cod_cargo
      AND miembro.centrocap = c_capacitacion.codigo
      AND miembro.nac = $nacionalidad
      AND miembro.cedula = $cedula
"""

STATION_ROLE_SCHEMA = {
    "mesa": int,
    "descripcion_cargo": str,
    "centrocap": str,
    "nombre_centro_capacitacion": str,
    "tallerdesde": str,
    "tallerhasta": str,
    "horario": str,
    "direccion_centro_capacitacion": str,
}

# ============================================================================
# Registry movements
# ============================================================================

MOVEMENTS_SQL = """
    SELECT
      t.cierre,
      c.nombre_corto,
      t.id_lote,
      tm.descripcion AS descripcion_movimiento,
      spm.descripcion AS descripcion_status,
      t.fecha_proceso_mov
    FROM re.movimiento t
    LEFT JOIN re.cierre c ON t.cierre = c.codigo
    LEFT JOIN re.tipo_movimiento tm ON t.tipo_movimiento = tm.tipo_movimiento
    LEFT JOIN re.status_proceso_mov spm ON t.status_proceso_mov = spm.codigo
    WHERE t.nacionalidad = $nacionalidad
      AND t.cedula_number = $cedula
    ORDER BY t.cierre DESC
"""

MOVEMENTS_SCHEMA = {
    "cierre": int,
    "nombre_corto": str,
    "id_lote": int,
    "descripcion_movimiento": str,
    "descripcion_status": str,
    "fecha_proceso_mov": str,
}

# ============================================================================
# Search (denormalized view)
# ============================================================================

SEARCH_VIEW = "re.v_elector_busqueda"

SEARCH_COLUMNS = (
    "nacionalidad",
    "cedula",
    "primer_nombre",
    "segundo_nombre",
    "primer_apellido",
    "segundo_apellido",
    "fecha_nacimiento",
    "codigo_centro",
)

SEARCH_SCHEMA = {
    "nacionalidad": str,
    "cedula": int,
    "primer_nombre": str,
    "segundo_nombre": str,
    "primer_apellido": str,
    "segundo_apellido": str,
    "fecha_nacimiento": str,
    "codigo_centro": str,
}
