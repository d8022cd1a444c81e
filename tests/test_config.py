"""Tests for text_chunking.config and text_chunking.logging_config."""

import logging

from text_chunking.config import ChunkingServiceConfig
from text_chunking.logging_config import get_logger, setup_logging


class TestServiceConfig:
    def test_defaults(self):
        config = ChunkingServiceConfig()
        assert config.data_dir == "data/chunking"
        assert config.chunking.chunk_size == 1000
        assert config.chunking.chunk_overlap == 200
        assert config.chunking.min_chunk_size == 700

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHUNKING_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CHUNK_SIZE", "500")
        monkeypatch.setenv("CHUNK_OVERLAP", "400")
        monkeypatch.setenv("MIN_CHUNK_SIZE", "300")

        config = ChunkingServiceConfig.from_env()
        assert config.data_dir == str(tmp_path)
        assert config.chunking.chunk_size == 500
        assert config.chunking.chunk_overlap == 250
        assert config.chunking.min_chunk_size == 300

    def test_from_env_defaults(self, monkeypatch):
        for name in ("CHUNKING_DATA_DIR", "CHUNK_SIZE", "CHUNK_OVERLAP", "MIN_CHUNK_SIZE"):
            monkeypatch.delenv(name, raising=False)

        config = ChunkingServiceConfig.from_env()
        assert config.data_dir == "data/chunking"
        assert config.chunking.chunk_size == 1000


class TestLogging:
    def test_get_logger_namespaced(self):
        assert get_logger("scripts").name == "text_chunking.scripts"
        assert get_logger("text_chunking.chunker").name == "text_chunking.chunker"

    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "chunking.log"
        setup_logging(level=logging.DEBUG)
        logger = setup_logging(level=logging.DEBUG, log_file=log_file)

        try:
            assert logger.name == "text_chunking"
            assert len(logger.handlers) == 2
            get_logger("tests").debug("written to file")
            for handler in logger.handlers:
                handler.flush()
            assert "written to file" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
