"""
Unit tests for RegistryConfig
"""

import os
from unittest.mock import patch

import pytest

from api.lib.config import DEFAULT_SEARCH_MAX_ROWS, RegistryConfig


class TestRegistryConfig:
    """Tests for configuration loading."""

    def test_defaults(self):
        config = RegistryConfig.from_env({})
        assert config.database_path is None
        assert config.parquet_root is None
        assert config.s3_bucket is None
        assert config.search_max_rows == DEFAULT_SEARCH_MAX_ROWS
        assert config.log_level == "INFO"
        assert config.effective_parquet_root is None

    def test_values_from_mapping(self):
        config = RegistryConfig.from_env({
            "REGISTRY_DB_PATH": "/data/registry.duckdb",
            "REGISTRY_PARQUET_ROOT": "/data/export/",
            "SEARCH_MAX_ROWS": "25",
            "LOG_LEVEL": "debug",
        })
        assert config.database_path == "/data/registry.duckdb"
        assert config.effective_parquet_root == "/data/export"
        assert config.search_max_rows == 25
        assert config.log_level == "DEBUG"

    def test_bucket_used_as_parquet_root(self):
        config = RegistryConfig.from_env({"S3_BUCKET_NAME": "registro-electoral"})
        assert config.effective_parquet_root == "s3://registro-electoral/registry"

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_max_rows(self, value):
        with pytest.raises(ValueError):
            RegistryConfig.from_env({"SEARCH_MAX_ROWS": value})

    def test_reads_process_environment(self):
        with patch.dict(os.environ, {"SEARCH_MAX_ROWS": "7"}, clear=True):
            with patch("api.lib.config.load_dotenv") as mock_load_dotenv:
                config = RegistryConfig.from_env()

        mock_load_dotenv.assert_called_once()
        assert config.search_max_rows == 7

    def test_config_is_immutable(self):
        config = RegistryConfig()
        with pytest.raises(Exception):
            config.search_max_rows = 10
