"""Records produced by extraction and the syntax tree the extractors walk."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class SymbolKind(str, Enum):
    """The kind of a named definition."""

    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"
    VARIABLE = "variable"
    INTERFACE = "interface"
    TYPE_ALIAS = "type_alias"
    ENUM = "enum"
    STRUCT = "struct"
    UNION = "union"
    TYPEDEF = "typedef"
    MACRO = "macro"
    NAMESPACE = "namespace"
    PROPERTY = "property"
    CONSTANT = "constant"
    TRAIT = "trait"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SymbolInfo:
    """A named definition found in a source file."""

    name: str
    kind: SymbolKind
    file_path: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    is_exported: bool


@dataclass(frozen=True)
class ImportInfo:
    """One imported name from one import statement."""

    source_file: str
    module_specifier: str
    imported_name: str
    local_name: str
    kind: str
    is_type_only: bool
    line: int
    is_external: bool


@dataclass(frozen=True)
class CommentInfo:
    """A comment and the symbol it documents, if any."""

    file_path: str
    text: str
    kind: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    associated_symbol: str | None = None
    associated_symbol_kind: str | None = None


@dataclass(eq=False)
class SyntaxNode:
    """A node of a concrete syntax tree.

    ``start_point`` and ``end_point`` are zero-based ``(row, column)`` pairs.
    ``field_name`` is the field under which the node hangs from its parent.
    Unnamed nodes stand for punctuation and keywords.
    """

    kind: str
    text: str = ""
    start_point: tuple[int, int] = (0, 0)
    end_point: tuple[int, int] = (0, 0)
    children: list[SyntaxNode] = field(default_factory=list)
    field_name: str | None = None
    is_named: bool = True
    parent: SyntaxNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.children = list(self.children)
        for child in self.children:
            child.parent = self

    def child_by_field_name(self, name: str) -> SyntaxNode | None:
        """The first child attached under field ``name``."""
        return next((c for c in self.children if c.field_name == name), None)

    def next_named_sibling(self) -> SyntaxNode | None:
        """The next named node after this one under the same parent."""
        if self.parent is None:
            return None
        siblings = self.parent.children
        position = next(i for i, node in enumerate(siblings) if node is self)
        return next((n for n in siblings[position + 1:] if n.is_named), None)

    def named_children(self) -> list[SyntaxNode]:
        """The named direct children."""
        return [c for c in self.children if c.is_named]

    def walk(self) -> Iterator[SyntaxNode]:
        """This node and all its descendants, depth first in source order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))