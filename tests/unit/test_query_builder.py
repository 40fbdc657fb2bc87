"""
Unit tests for ElectorSearchQueryBuilder
"""

import pytest

from api.lib.errors import RequestValidationError, ValidationErrorKind
from api.lib.query_builder import ElectorSearchQueryBuilder, SearchQuery
from api.lib.response_models import SearchFilterSet


def build(**filters):
    return ElectorSearchQueryBuilder().build(SearchFilterSet(**filters))


class TestValidation:
    """Tests for filter validation rules."""

    def test_no_filters_rejected(self):
        with pytest.raises(RequestValidationError) as exc_info:
            build()
        assert exc_info.value.kind == ValidationErrorKind.NO_FILTER_PROVIDED

    def test_blank_filters_rejected(self):
        with pytest.raises(RequestValidationError) as exc_info:
            build(primer_nombre="   ", cedula="", codigo_centro="")
        assert exc_info.value.kind == ValidationErrorKind.NO_FILTER_PROVIDED

    def test_invalid_nationality_silently_dropped(self):
        query = build(nacionalidad="X", primer_apellido="perez")
        assert "nacionalidad" not in query.params
        assert query.params == {"primer_apellido": "PEREZ"}

    def test_only_invalid_nationality_leaves_no_filter(self):
        with pytest.raises(RequestValidationError) as exc_info:
            build(nacionalidad="X")
        assert exc_info.value.kind == ValidationErrorKind.NO_FILTER_PROVIDED

    @pytest.mark.parametrize("cedula", [0, -5, 100_000_000, "100000000", "12a"])
    def test_out_of_range_cedula_is_an_error(self, cedula):
        """Test national ID is a hard error, unlike nationality."""
        with pytest.raises(RequestValidationError) as exc_info:
            build(cedula=cedula)
        assert exc_info.value.kind == ValidationErrorKind.INVALID_IDENTIFIER

    def test_invalid_birth_date(self):
        with pytest.raises(RequestValidationError) as exc_info:
            build(fecha_nacimiento="1999-13-40")
        assert exc_info.value.kind == ValidationErrorKind.INVALID_DATE

    def test_blank_birth_date_ignored(self):
        query = build(fecha_nacimiento="  ", primer_nombre="maria")
        assert "fecha_nacimiento" not in query.params


class TestPredicates:
    """Tests for the generated fragments and bindings."""

    def test_nationality_normalized(self):
        query = build(nacionalidad=" v ")
        assert query.params == {"nacionalidad": "V"}
        assert query.predicates == ["AND nacionalidad = $nacionalidad"]

    def test_cedula_bound_as_string(self):
        query = build(cedula=28524669)
        assert query.params == {"cedula": "28524669"}
        assert query.predicates == ["AND CAST(cedula AS VARCHAR) = $cedula"]

    def test_birth_date_normalized(self):
        query = build(fecha_nacimiento="19990512")
        assert query.params == {"fecha_nacimiento": "1999-05-12"}

    def test_names_trimmed_and_uppercased(self):
        query = build(primer_nombre=" maria ", segundo_apellido="Gómez")
        assert query.params == {"primer_nombre": "MARIA", "segundo_apellido": "GÓMEZ"}
        assert "AND UPPER(primer_nombre) = $primer_nombre" in query.predicates

    def test_voting_center_untransformed(self):
        query = build(codigo_centro="010101001")
        assert query.params == {"codigo_centro": "010101001"}

    def test_fragment_order_follows_rules(self):
        query = build(
            codigo_centro="130801001",
            segundo_apellido="gomez",
            primer_nombre="maria",
            fecha_nacimiento="1999-05-12",
            cedula="28524669",
            nacionalidad="V",
        )
        assert list(query.params) == [
            "nacionalidad",
            "cedula",
            "fecha_nacimiento",
            "primer_nombre",
            "segundo_apellido",
            "codigo_centro",
        ]
        assert len(query.predicates) == 6
        assert all(p.startswith("AND ") for p in query.predicates)
        assert all(isinstance(v, str) for v in query.params.values())


class TestSearchQuerySql:
    """Tests for SearchQuery.to_sql."""

    def test_sql_shape(self):
        query = SearchQuery()
        query.add("primer_apellido", "UPPER(primer_apellido)", "PEREZ")
        sql = query.to_sql(limit=50)

        assert sql.startswith("SELECT nacionalidad, cedula, primer_nombre")
        assert "FROM re.v_elector_busqueda" in sql
        assert "WHERE 1 = 1" in sql
        assert "AND UPPER(primer_apellido) = $primer_apellido" in sql
        assert sql.endswith("LIMIT 50")

    def test_values_never_inlined(self):
        query = build(primer_apellido="O'HIGGINS")
        sql = query.to_sql(limit=10)
        assert "HIGGINS" not in sql
        assert query.params["primer_apellido"] == "O'HIGGINS"
