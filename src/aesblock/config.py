"""Cipher configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_MAX_WORKERS = "AESBLOCK_MAX_WORKERS"
ENV_PARALLEL_THRESHOLD = "AESBLOCK_PARALLEL_THRESHOLD"


@dataclass(frozen=True)
class CipherConfig:
    """Configuration for message-level block processing.

    Controls how blocks are distributed over the worker pool. None of it
    affects the ciphertext; block order is always preserved.
    """

    # Worker pool size; None means one worker per available CPU
    max_workers: int | None = None

    # Messages with fewer blocks than this run in the calling thread
    parallel_threshold: int = 4

    # Text encoding used by encrypt()/decrypt()
    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.parallel_threshold < 1:
            raise ValueError(f"parallel_threshold must be >= 1, got {self.parallel_threshold}")

    @property
    def workers(self) -> int:
        """Effective pool size."""
        if self.max_workers is not None:
            return self.max_workers
        return os.cpu_count() or 1

    @classmethod
    def from_env(cls) -> CipherConfig:
        """Build a config from AESBLOCK_* environment variables."""
        kwargs = {}
        if os.environ.get(ENV_MAX_WORKERS):
            kwargs["max_workers"] = _parse_int(ENV_MAX_WORKERS)
        if os.environ.get(ENV_PARALLEL_THRESHOLD):
            kwargs["parallel_threshold"] = _parse_int(ENV_PARALLEL_THRESHOLD)
        return cls(**kwargs)


def _parse_int(name: str) -> int:
    raw = os.environ[name]
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
