"""PHP tokenizer built on tree-sitter-php."""

from hintsniff.adapters.php.adapter import PhpTokenizer

__all__ = ["PhpTokenizer"]
