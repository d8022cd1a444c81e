"""
Data Models for the Text Chunking Pipeline

Defines:
1. ChunkerConfig - Chunk size, overlap and minimum size (in characters)
2. Chunk - A single text chunk with its positional metadata
3. ChunkingStats - Size statistics over one chunking run
4. ChunkingResult - Complete chunking output for one document
5. API request/response schemas used by the FastAPI app

Design Principles:
- Pydantic v2 for validation and serialization
- Sizes are Unicode code point counts, never byte counts
- Metadata stays an open mapping so caller fields travel with every chunk
- Save/load pattern for persisted results

Usage:
    config = ChunkerConfig(chunk_size=800, chunk_overlap=100)
    chunks = TextChunker(config).split_text(text, {"source_type": "post"})
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ChunkerConfig(BaseModel):
    """
    Configuration for the text chunker.

    All sizes are measured in characters (code points). The overlap is
    clamped to half of chunk_size at construction and the config cannot be
    changed afterwards. min_chunk_size is not checked against chunk_size;
    keeping it below chunk_size is the caller's responsibility.
    """
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(
        1000,
        description="Target maximum characters per chunk",
        ge=1,
    )
    chunk_overlap: int = Field(
        200,
        description="Characters copied from each neighbor into a chunk",
        ge=0,
        validate_default=True,
    )
    min_chunk_size: int = Field(
        700,
        description="Minimum characters a chunk should reach after merging",
        ge=1,
    )

    @field_validator("chunk_overlap")
    @classmethod
    def _clamp_overlap(cls, value: int, info: ValidationInfo) -> int:
        # chunk_size is validated first; it is missing only if it was invalid
        chunk_size = info.data.get("chunk_size")
        if chunk_size is None:
            return value
        return min(value, chunk_size // 2)


class Chunk(BaseModel):
    """
    A single text chunk, ready for embedding and storage.

    metadata holds the caller's fields merged with the chunker's:
    chunk_index, total_chunks, has_previous, has_next, size,
    original_size, has_overlap_prev, has_overlap_next.
    """
    content: str = Field(
        ...,
        description="Chunk text including any overlap copied from neighbors",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Caller metadata merged with positional fields",
    )

    @property
    def chunk_index(self) -> int:
        return self.metadata["chunk_index"]

    @property
    def size(self) -> int:
        return self.metadata["size"]

    @property
    def original_size(self) -> int:
        return self.metadata["original_size"]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ChunkingStats(BaseModel):
    """Statistics about one chunking run."""
    total_chunks: int = 0
    total_characters: int = 0
    total_original_characters: int = 0
    avg_original_size: float = 0.0
    min_original_size: int = 0
    max_original_size: int = 0
    chunks_with_overlap: int = 0
    normalized_length: int = 0


class ChunkingResult(BaseModel):
    """
    Complete result of chunking one document.

    Chunks are stored in chunk_index order.
    """
    document_id: str = Field(
        ...,
        description="Unique document identifier",
    )
    source: str = Field(
        "inline",
        description="Where the text came from (file path or 'inline')",
    )
    config: ChunkerConfig = Field(
        ...,
        description="Configuration used for chunking",
    )
    chunks: list[Chunk] = Field(
        default_factory=list,
        description="All chunks in order",
    )
    stats: ChunkingStats = Field(
        default_factory=ChunkingStats,
        description="Chunking statistics",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When chunking was performed",
    )

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def get_chunk(self, index: int) -> Optional[Chunk]:
        """Return the chunk at a given chunk_index, or None."""
        if 0 <= index < len(self.chunks):
            return self.chunks[index]
        return None

    def get_neighbors(self, index: int) -> tuple[Optional[Chunk], Optional[Chunk]]:
        """Get the previous and next chunks for context expansion."""
        if self.get_chunk(index) is None:
            return None, None
        return self.get_chunk(index - 1), self.get_chunk(index + 1)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save chunking result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "ChunkingResult":
        """Load chunking result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


# -----------------------------------------------------------------------------
# API schemas
# -----------------------------------------------------------------------------


class ChunkTextRequest(BaseModel):
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    document_id: Optional[str] = Field(None, min_length=1)
    persist: bool = False


class ChunkFileRequest(BaseModel):
    path: str = Field(..., min_length=1)
    metadata: dict[str, Any] = Field(default_factory=dict)


class ChunkResponse(BaseModel):
    document_id: str
    total_chunks: int
    output_path: Optional[str] = None
    stats: ChunkingStats
    chunks: list[Chunk] = Field(default_factory=list)


class SettingsResponse(BaseModel):
    chunk_size: int
    chunk_overlap: int
    min_chunk_size: int
