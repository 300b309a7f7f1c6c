"""PHP AST utility helpers."""

from __future__ import annotations

from tree_sitter import Node

from hintsniff.core.tokens import TokenKind

# Named nodes emitted as a single token instead of being split into their children.
ATOMIC_NODE_KINDS: dict[str, TokenKind] = {
    "name": TokenKind.IDENTIFIER,
    "variable_name": TokenKind.VARIABLE,
    "primitive_type": TokenKind.IDENTIFIER,
    "relative_scope": TokenKind.IDENTIFIER,
    "boolean": TokenKind.IDENTIFIER,
    "null": TokenKind.IDENTIFIER,
    "bottom_type": TokenKind.IDENTIFIER,
    "string": TokenKind.STRING_LITERAL,
    "encapsed_string": TokenKind.STRING_LITERAL,
    "heredoc": TokenKind.STRING_LITERAL,
    "nowdoc": TokenKind.STRING_LITERAL,
    "shell_command_expression": TokenKind.STRING_LITERAL,
    "integer": TokenKind.NUMBER,
    "float": TokenKind.NUMBER,
    "comment": TokenKind.COMMENT,
    "text": TokenKind.INLINE_HTML,
    "php_tag": TokenKind.OPEN_TAG,
    "visibility_modifier": TokenKind.MODIFIER,
    "static_modifier": TokenKind.MODIFIER,
    "abstract_modifier": TokenKind.MODIFIER,
    "final_modifier": TokenKind.MODIFIER,
    "readonly_modifier": TokenKind.MODIFIER,
    "var_modifier": TokenKind.MODIFIER,
    "reference_modifier": TokenKind.BITWISE_AND,
}

_PUNCTUATION_KINDS: dict[str, TokenKind] = {
    "(": TokenKind.OPEN_PARENTHESIS,
    ")": TokenKind.CLOSE_PARENTHESIS,
    "{": TokenKind.OPEN_CURLY_BRACKET,
    "}": TokenKind.CLOSE_CURLY_BRACKET,
    "[": TokenKind.OPEN_SQUARE_BRACKET,
    "]": TokenKind.CLOSE_SQUARE_BRACKET,
    ":": TokenKind.COLON,
    "&": TokenKind.BITWISE_AND,
    "|": TokenKind.BITWISE_OR,
    "...": TokenKind.ELLIPSIS,
    "=": TokenKind.EQUAL,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "\\": TokenKind.NS_SEPARATOR,
    "?>": TokenKind.CLOSE_TAG,
    "?": TokenKind.INLINE_THEN,
}

_KEYWORD_KINDS: dict[str, TokenKind] = {
    "return": TokenKind.RETURN,
    "fn": TokenKind.FN,
    "use": TokenKind.USE,
    "public": TokenKind.MODIFIER,
    "protected": TokenKind.MODIFIER,
    "private": TokenKind.MODIFIER,
    "abstract": TokenKind.MODIFIER,
    "final": TokenKind.MODIFIER,
    "readonly": TokenKind.MODIFIER,
}

# Keywords whose kind depends on the node that contains them.
_CONTEXTUAL_KEYWORDS: dict[str, dict[str, TokenKind]] = {
    "function": {
        "function_definition": TokenKind.FUNCTION,
        "method_declaration": TokenKind.FUNCTION,
        "anonymous_function": TokenKind.CLOSURE,
        "anonymous_function_creation_expression": TokenKind.CLOSURE,
    },
    "class": {
        "class_declaration": TokenKind.CLASS,
        "anonymous_class": TokenKind.ANON_CLASS,
        "object_creation_expression": TokenKind.ANON_CLASS,
    },
    "interface": {"interface_declaration": TokenKind.INTERFACE},
    "trait": {"trait_declaration": TokenKind.TRAIT},
    "enum": {"enum_declaration": TokenKind.ENUM},
    "namespace": {"namespace_definition": TokenKind.NAMESPACE},
}

TYPE_NODE_TYPES = frozenset(
    {
        "named_type",
        "optional_type",
        "union_type",
        "intersection_type",
        "disjunctive_normal_form_type",
        "type_list",
        "primitive_type",
    }
)

ATTRIBUTE_NODE_TYPES = frozenset({"attribute_group", "attribute_list"})


class PhpAstUtils:
    """Utility helpers for tree-sitter-php nodes."""

    @staticmethod
    def get_node_text(node: Node, content: bytes) -> str:
        return content[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    @staticmethod
    def is_atomic(node: Node) -> bool:
        return node.child_count == 0 or (node.is_named and node.type in ATOMIC_NODE_KINDS)

    @staticmethod
    def classify(node: Node, text: str) -> TokenKind:
        """Token kind of an atomic node, using its parent for ambiguous keywords."""
        parent_type = node.parent.type if node.parent is not None else ""

        if node.is_named:
            kind = ATOMIC_NODE_KINDS.get(node.type)
            if kind == TokenKind.COMMENT and text.startswith("/**"):
                return TokenKind.DOC_COMMENT
            if kind is not None:
                return kind
            if node.type == "ERROR":
                return TokenKind.OTHER
            return TokenKind.IDENTIFIER if text.isidentifier() else TokenKind.OTHER

        node_type = node.type.lower()
        if node_type == "?" and parent_type == "optional_type":
            return TokenKind.NULLABLE
        if node_type == "&" and parent_type == "intersection_type":
            return TokenKind.TYPE_INTERSECTION
        if node_type == "]" and parent_type in ATTRIBUTE_NODE_TYPES:
            return TokenKind.ATTRIBUTE_CLOSER
        if node_type in _PUNCTUATION_KINDS:
            return _PUNCTUATION_KINDS[node_type]

        contextual = _CONTEXTUAL_KEYWORDS.get(node_type)
        if contextual is not None:
            return contextual.get(parent_type, TokenKind.KEYWORD)
        if node_type in _KEYWORD_KINDS:
            return _KEYWORD_KINDS[node_type]

        if text.isidentifier():
            # Words inside a type (e.g. `static`, `mixed`) are part of the hint.
            if parent_type in TYPE_NODE_TYPES:
                return TokenKind.IDENTIFIER
            return TokenKind.KEYWORD
        return TokenKind.OPERATOR
