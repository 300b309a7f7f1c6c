"""Base class for language tokenizers.

A tokenizer turns source text into a linked :class:`TokenBuffer`. The
analysis layer only ever sees the buffer, never the parser behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from hintsniff.core.tokens import TokenBuffer


class Tokenizer(ABC):
    """Abstract base class for language tokenizers."""

    @property
    @abstractmethod
    def language(self) -> str:
        """Name of the tokenized language."""

    @property
    @abstractmethod
    def file_extensions(self) -> tuple[str, ...]:
        """Extensions of the files this tokenizer understands."""

    @abstractmethod
    def tokenize(self, source: str) -> TokenBuffer:
        """Tokenize source text.

        Raises:
            MalformedBufferError: If the token stream cannot be linked.
        """

    def tokenize_file(self, path: Path) -> TokenBuffer:
        """Read and tokenize a file."""
        return self.tokenize(path.read_text(encoding="utf-8", errors="replace"))
