"""
Pytest fixtures for text chunking tests.
"""

import pytest

from text_chunking import ChunkerConfig, ChunkingServiceConfig, TextChunker


def make_sentences(count: int, length: int = 99) -> list[str]:
    """Build `count` distinct sentences of exactly `length` characters."""
    sentences = []
    for i in range(count):
        prefix = f"Sentence {i:03d} "
        sentences.append(prefix + "w" * (length - len(prefix) - 1) + ".")
    return sentences


@pytest.fixture
def default_chunker():
    """TextChunker with the documented defaults (1000 / 200 / 700)."""
    return TextChunker()


@pytest.fixture
def small_config():
    """Small limits for readable test inputs."""
    return ChunkerConfig(chunk_size=100, chunk_overlap=20, min_chunk_size=50)


@pytest.fixture
def service_config(tmp_path):
    """Service config writing results below a temporary directory."""
    return ChunkingServiceConfig(data_dir=str(tmp_path / "chunking"))


@pytest.fixture
def long_paragraph():
    """A single paragraph of 30 sentences, 2999 characters."""
    return " ".join(make_sentences(30))
