"""
Text Chunking - Overlapping, size-bounded text chunks for embedding

Splits raw prose into paragraph- and sentence-aligned chunks of bounded
character length, copies context from neighboring chunks into each one and
tags every chunk with positional metadata.

Quick Start:
    from text_chunking import TextChunker, ChunkerConfig

    chunker = TextChunker(ChunkerConfig(chunk_size=1000, chunk_overlap=200))
    chunks = chunker.split_text(text, {"document_id": "handbook"})
    for chunk in chunks:
        print(chunk.metadata["chunk_index"], chunk.content[:40])
"""

__version__ = "1.0.0"

from .chunker import TextChunker
from .service import ChunkingService
from .config import ChunkingServiceConfig
from .models import (
    Chunk,
    ChunkerConfig,
    ChunkingResult,
    ChunkingStats,
)
from .normalizer import normalize_text
from .splitter import split_paragraphs, split_sentences
from .exceptions import (
    ChunkingError,
    DocumentError,
    DocumentNotFoundError,
    DocumentReadError,
    StorageError,
    ResultNotFoundError,
    InvalidDocumentIdError,
)

__all__ = [
    "__version__",
    "TextChunker",
    "ChunkingService",
    "ChunkingServiceConfig",
    "Chunk",
    "ChunkerConfig",
    "ChunkingResult",
    "ChunkingStats",
    "normalize_text",
    "split_paragraphs",
    "split_sentences",
    "ChunkingError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentReadError",
    "StorageError",
    "ResultNotFoundError",
    "InvalidDocumentIdError",
]
