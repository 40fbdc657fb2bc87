"""
Unit tests for named-field row decoding
"""

import math

import numpy as np
import pandas as pd
import pytest

from api.lib.row_decoder import RowSchemaError, decode_row, to_optional_int, to_optional_str


class TestConverters:
    """Tests for per-cell conversion."""

    @pytest.mark.parametrize("value,expected", [
        (5, 5),
        (np.int64(7), 7),
        (3.0, 3),
        ("42", 42),
        (" 42 ", 42),
        (None, None),
        (float("nan"), None),
        (pd.NA, None),
        ("abc", None),
        (2.5, None),
        (True, None),
    ])
    def test_to_optional_int(self, value, expected):
        assert to_optional_int(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("MARIA", "MARIA"),
        (101, "101"),
        (130801001.0, "130801001"),
        (None, None),
        (float("nan"), None),
        (pd.NaT, None),
    ])
    def test_to_optional_str(self, value, expected):
        assert to_optional_str(value) == expected

    def test_timestamp_to_str(self):
        assert to_optional_str(pd.Timestamp("2024-07-28")).startswith("2024-07-28")


class TestDecodeRow:
    """Tests for decode_row."""

    def test_decodes_declared_columns_only(self):
        row = {"nu_mesa": 3.0, "fe_evento": "20240728", "extra": "ignored"}
        decoded = decode_row(row, {"nu_mesa": int, "fe_evento": str})
        assert decoded == {"nu_mesa": 3, "fe_evento": "20240728"}

    def test_column_lookup_is_case_insensitive(self):
        row = {"NU_MESA": 3, "FE_EVENTO": None}
        decoded = decode_row(row, {"nu_mesa": int, "fe_evento": str})
        assert decoded == {"nu_mesa": 3, "fe_evento": None}

    def test_missing_column_raises(self):
        with pytest.raises(RowSchemaError, match="nu_pagina"):
            decode_row({"nu_mesa": 3}, {"nu_mesa": int, "nu_pagina": int})

    def test_undecodable_cell_is_absent(self):
        decoded = decode_row({"nu_mesa": "N/A"}, {"nu_mesa": int})
        assert decoded["nu_mesa"] is None
