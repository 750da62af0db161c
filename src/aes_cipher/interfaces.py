"""Configuration and result objects for the block adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ErrorCode


@dataclass
class CipherConfig:
    """Configuration for message-level encryption and decryption.

    Blocks are independent, so a message may be spread over a thread
    pool. Small messages always run inline.
    """

    # Worker threads for block processing (1 = sequential)
    workers: int = 1

    # Minimum number of blocks before the pool is used
    parallel_threshold: int = 64

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.parallel_threshold < 1:
            raise ValueError(
                f"parallel_threshold must be >= 1, got {self.parallel_threshold}"
            )

    def use_pool(self, num_blocks: int) -> bool:
        """Whether a message of num_blocks blocks goes to the worker pool."""
        return self.workers > 1 and num_blocks >= self.parallel_threshold


@dataclass
class CipherResult:
    """Outcome of a message transform: either output or an error, never both."""

    output: bytes | None = None
    error: ErrorCode | None = None
    error_detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "output_hex": self.output.hex() if self.output is not None else None,
            "error": self.error.value if self.error else None,
            "error_detail": self.error_detail,
        }
