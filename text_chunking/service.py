from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from .chunker import TextChunker
from .config import ChunkingServiceConfig
from .exceptions import DocumentNotFoundError, DocumentReadError
from .logging_config import get_logger
from .models import Chunk, ChunkingResult, ChunkingStats
from .normalizer import normalize_text
from .storage import ChunkingStorage

logger = get_logger(__name__)


class ChunkingService:
    def __init__(self, config: ChunkingServiceConfig | None = None):
        self.config = config or ChunkingServiceConfig()
        self.chunker = TextChunker(self.config.chunking)
        self.storage = ChunkingStorage(self.config.data_dir)

    @staticmethod
    def make_document_id(source: str) -> str:
        """Generate a document ID from a file path."""
        # Normalize Windows backslashes for cross-platform compatibility
        normalized = source.replace("\\", "/")
        return Path(normalized).stem

    def chunk_text(
        self,
        text: str | bytes,
        metadata: Optional[Mapping[str, Any]] = None,
        document_id: Optional[str] = None,
        source: str = "inline",
        source_type: str = "text",
    ) -> ChunkingResult:
        document_id = document_id or self.make_document_id(source)
        chunk_metadata = {"document_id": document_id, "source_type": source_type}
        chunk_metadata.update(metadata or {})

        chunks = self.chunker.split_text(text, chunk_metadata)
        stats = self._compute_stats(chunks, len(normalize_text(text)))
        logger.info(
            "Chunked document %s into %d chunks", document_id, stats.total_chunks
        )
        return ChunkingResult(
            document_id=document_id,
            source=source,
            config=self.chunker.config,
            chunks=chunks,
            stats=stats,
        )

    def chunk_file(
        self,
        path: str,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> ChunkingResult:
        file_path = Path(path)
        if not file_path.is_file():
            raise DocumentNotFoundError(str(path))
        try:
            raw = file_path.read_bytes()
        except OSError as exc:
            raise DocumentReadError(str(path), exc) from exc
        return self.chunk_text(
            raw,
            metadata=metadata,
            source=str(path),
            source_type="file",
        )

    def chunk_and_save(
        self,
        path: str,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> tuple[ChunkingResult, str]:
        result = self.chunk_file(path, metadata)
        paths = self.storage.save(result)
        return result, str(paths.chunk_file)

    def chunk_text_and_save(
        self,
        text: str | bytes,
        metadata: Optional[Mapping[str, Any]] = None,
        document_id: Optional[str] = None,
    ) -> tuple[ChunkingResult, str]:
        result = self.chunk_text(text, metadata, document_id=document_id)
        paths = self.storage.save(result)
        return result, str(paths.chunk_file)

    def load_result(self, document_id: str) -> ChunkingResult:
        return self.storage.load_latest(document_id)

    def _compute_stats(self, chunks: list[Chunk], normalized_length: int) -> ChunkingStats:
        if not chunks:
            return ChunkingStats(normalized_length=normalized_length)

        original_sizes = [c.original_size for c in chunks]
        return ChunkingStats(
            total_chunks=len(chunks),
            total_characters=sum(c.size for c in chunks),
            total_original_characters=sum(original_sizes),
            avg_original_size=sum(original_sizes) / len(original_sizes),
            min_original_size=min(original_sizes),
            max_original_size=max(original_sizes),
            chunks_with_overlap=sum(1 for c in chunks if c.size > c.original_size),
            normalized_length=normalized_length,
        )
