from dataclasses import dataclass, field
import os

from .models import ChunkerConfig


@dataclass
class ChunkingServiceConfig:
    data_dir: str = "data/chunking"
    chunking: ChunkerConfig = field(default_factory=ChunkerConfig)

    @classmethod
    def from_env(cls) -> "ChunkingServiceConfig":
        defaults = ChunkerConfig()

        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        return cls(
            data_dir=os.environ.get("CHUNKING_DATA_DIR", cls.data_dir),
            chunking=ChunkerConfig(
                chunk_size=_int("CHUNK_SIZE", defaults.chunk_size),
                chunk_overlap=_int("CHUNK_OVERLAP", defaults.chunk_overlap),
                min_chunk_size=_int("MIN_CHUNK_SIZE", defaults.min_chunk_size),
            ),
        )
