"""Language tokenizers.

This module provides the tokenizer interface and the language-specific
implementations that produce linked token buffers for the analysis layer.
"""

from hintsniff.adapters.base import Tokenizer
from hintsniff.adapters.php import PhpTokenizer

__all__ = [
    "PhpTokenizer",
    "Tokenizer",
]
