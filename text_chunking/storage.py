from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .exceptions import InvalidDocumentIdError, ResultNotFoundError, StorageError
from .models import ChunkingResult


@dataclass
class ChunkingPaths:
    document_id: str
    chunk_dir: Path
    chunk_file: Path


class ChunkingStorage:
    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def chunk_dir(self, document_id: str) -> Path:
        """Chunk directory of a document; the ID must be one path segment."""
        if (
            document_id in ("", ".", "..")
            or "/" in document_id
            or "\\" in document_id
            or "\x00" in document_id
        ):
            raise InvalidDocumentIdError(document_id)
        document_dir = self.data_dir / document_id
        if document_dir.resolve().parent != self.data_dir.resolve():
            raise InvalidDocumentIdError(document_id)
        return document_dir / "chunks"

    def build_paths(self, document_id: str) -> ChunkingPaths:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        chunk_dir = self.chunk_dir(document_id)
        chunk_dir.mkdir(parents=True, exist_ok=True)
        chunk_file = chunk_dir / f"{document_id}_{timestamp}.json"
        return ChunkingPaths(
            document_id=document_id,
            chunk_dir=chunk_dir,
            chunk_file=chunk_file,
        )

    def save(self, result: ChunkingResult) -> ChunkingPaths:
        try:
            paths = self.build_paths(result.document_id)
            result.save(str(paths.chunk_file))
        except OSError as exc:
            raise StorageError(
                f"Failed to save chunks for document: {result.document_id}",
                details=str(exc),
            ) from exc
        return paths

    def list_results(self, document_id: str) -> list[Path]:
        """Stored result files for a document, oldest first."""
        chunk_dir = self.chunk_dir(document_id)
        if not chunk_dir.is_dir():
            return []
        prefix = f"{document_id}_"
        return sorted(
            path
            for path in chunk_dir.iterdir()
            if path.is_file() and path.name.startswith(prefix) and path.suffix == ".json"
        )

    def load_latest(self, document_id: str) -> ChunkingResult:
        files = self.list_results(document_id)
        if not files:
            raise ResultNotFoundError(document_id)
        try:
            return ChunkingResult.load(str(files[-1]))
        except (OSError, ValueError) as exc:
            raise StorageError(
                f"Failed to load chunks for document: {document_id}",
                details=str(exc),
            ) from exc
