"""Tests for configuration and logging setup."""

import logging

from config.logging_config import get_logger, setup_logging
from config.settings import CatalogConfig, FilterConfig


class TestFilterConfig:
    """Tests for FilterConfig."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FILTER_DEBOUNCE_MS", raising=False)
        monkeypatch.delenv("FACET_CATALOG_PATH", raising=False)
        cfg = FilterConfig()

        assert cfg.debounce_ms == 500
        assert cfg.debounce_seconds == 0.5
        assert cfg.facet_catalog_path is None
        assert cfg.release_year_window == 10

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FILTER_DEBOUNCE_MS", "250")
        monkeypatch.setenv("FACET_CATALOG_PATH", str(tmp_path / "facets.json"))
        cfg = FilterConfig()

        assert cfg.debounce_seconds == 0.25
        assert cfg.facet_catalog_path == tmp_path / "facets.json"

    def test_bad_env_value_falls_back(self, monkeypatch):
        monkeypatch.setenv("FILTER_DEBOUNCE_MS", "soon")
        assert FilterConfig().debounce_ms == 500

    def test_negative_delay_clamped(self):
        assert FilterConfig(debounce_ms=-100).debounce_seconds == 0


class TestCatalogConfig:
    """Tests for CatalogConfig."""

    def test_in_memory_by_default(self, monkeypatch):
        monkeypatch.delenv("CATALOG_DB_PATH", raising=False)
        monkeypatch.delenv("CATALOG_PAGE_SIZE", raising=False)
        cfg = CatalogConfig()

        assert cfg.db_path is None
        assert cfg.default_page_size == 24


class TestLogging:
    """Tests for logging setup."""

    def test_logger_names(self):
        assert get_logger().name == "storefront"
        assert get_logger("filters.store").name == "storefront.filters.store"

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        logger = setup_logging("DEBUG", log_file=log_file, log_to_console=False)

        get_logger("test").info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "storefront.test | hello" in log_file.read_text()

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
