"""Symbol, include and comment extraction for C syntax trees."""

from __future__ import annotations

from collections.abc import Iterator

from virgil.languages.base import (
    CommentInfo,
    ImportInfo,
    SymbolInfo,
    SymbolKind,
    SyntaxNode,
)

_KIND_BY_NODE: dict[str, SymbolKind] = {
    "function_definition": SymbolKind.FUNCTION,
    "struct_specifier": SymbolKind.STRUCT,
    "union_specifier": SymbolKind.UNION,
    "enum_specifier": SymbolKind.ENUM,
    "type_definition": SymbolKind.TYPEDEF,
    "preproc_def": SymbolKind.MACRO,
    "preproc_function_def": SymbolKind.MACRO,
}

# Macros and type definitions have no linkage; they are always visible.
_ALWAYS_EXPORTED = frozenset(
    {
        "preproc_def",
        "preproc_function_def",
        "struct_specifier",
        "union_specifier",
        "enum_specifier",
        "type_definition",
    }
)

_NAMED_BY_FIELD: dict[str, str] = {
    "struct_specifier": "struct",
    "union_specifier": "union",
    "enum_specifier": "enum",
    "preproc_def": "macro",
    "preproc_function_def": "macro",
}


def _in_field(node: SyntaxNode, field: str, kind: str) -> Iterator[SyntaxNode]:
    return (c for c in node.children if c.field_name == field and c.kind == kind)


def _function_names(declarator_owner: SyntaxNode) -> Iterator[SyntaxNode]:
    for func in _in_field(declarator_owner, "declarator", "function_declarator"):
        yield from _in_field(func, "declarator", "identifier")


def _definition_names(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Name nodes of every definition pattern that ``node`` matches."""
    kind = node.kind
    if kind == "function_definition":
        yield from _function_names(node)
        for pointer in _in_field(node, "declarator", "pointer_declarator"):
            yield from _function_names(pointer)
    elif kind == "declaration":
        yield from _function_names(node)
        for init in _in_field(node, "declarator", "init_declarator"):
            yield from _in_field(init, "declarator", "identifier")
        yield from _in_field(node, "declarator", "identifier")
    elif kind in ("struct_specifier", "union_specifier"):
        if any(_in_field(node, "body", "field_declaration_list")):
            yield from _in_field(node, "name", "type_identifier")
    elif kind == "enum_specifier":
        if any(_in_field(node, "body", "enumerator_list")):
            yield from _in_field(node, "name", "type_identifier")
    elif kind == "type_definition":
        yield from _in_field(node, "declarator", "type_identifier")
    elif kind in ("preproc_def", "preproc_function_def"):
        yield from _in_field(node, "name", "identifier")


def _has_child_kind(node: SyntaxNode, kind: str) -> bool:
    return any(child.kind == kind for child in node.children)


def _determine_kind(node: SyntaxNode) -> SymbolKind | None:
    if node.kind == "declaration":
        if _has_child_kind(node, "function_declarator"):
            return SymbolKind.FUNCTION
        return SymbolKind.VARIABLE
    return _KIND_BY_NODE.get(node.kind)


def _is_exported(node: SyntaxNode) -> bool:
    if node.kind in _ALWAYS_EXPORTED:
        return True
    return not any(
        child.kind == "storage_class_specifier" and child.text == "static"
        for child in node.children
    )


def extract_symbols(root: SyntaxNode, file_path: str) -> list[SymbolInfo]:
    """Functions, variables, types and macros defined in a C tree."""
    symbols: list[SymbolInfo] = []
    for node in root.walk():
        for name_node in _definition_names(node):
            name = name_node.text
            if not name:
                continue
            kind = _determine_kind(node)
            if kind is None:
                continue
            symbols.append(
                SymbolInfo(
                    name=name,
                    kind=kind,
                    file_path=file_path,
                    start_line=node.start_point[0],
                    start_column=node.start_point[1],
                    end_line=node.end_point[0],
                    end_column=node.end_point[1],
                    is_exported=_is_exported(node),
                )
            )
    return symbols


def strip_include_path(text: str) -> str:
    """Remove the angle brackets or quotes around an include path."""
    text = text.strip()
    if (text.startswith("<") and text.endswith(">")) or (
        text.startswith('"') and text.endswith('"')
    ):
        return text[1:-1].strip()
    return text


def extract_imports(root: SyntaxNode, file_path: str) -> list[ImportInfo]:
    """One import record per ``#include`` directive."""
    imports: list[ImportInfo] = []
    for node in root.walk():
        if node.kind != "preproc_include":
            continue
        for path_node in (c for c in node.children if c.field_name == "path"):
            raw_path = path_node.text
            if not raw_path:
                continue
            imports.append(
                ImportInfo(
                    source_file=file_path,
                    module_specifier=strip_include_path(raw_path),
                    imported_name="*",
                    local_name="*",
                    kind="include",
                    is_type_only=False,
                    line=node.start_point[0],
                    is_external=path_node.kind == "system_lib_string",
                )
            )
    return imports


def classify_comment(text: str) -> str:
    """Return ``doc``, ``block`` or ``line`` for a comment's text."""
    trimmed = text.lstrip()
    if trimmed.startswith(("/**", "///")):
        return "doc"
    if trimmed.startswith("/*"):
        return "block"
    return "line"


def _find_identifier(node: SyntaxNode) -> str | None:
    current: SyntaxNode | None = node
    while current is not None:
        if current.kind == "identifier":
            return current.text
        current = current.child_by_field_name("declarator")
    return None


def _declarator_identifier(node: SyntaxNode) -> str | None:
    declarator = node.child_by_field_name("declarator")
    return _find_identifier(declarator) if declarator is not None else None


def _field_text(node: SyntaxNode, field: str) -> str | None:
    child = node.child_by_field_name(field)
    return child.text if child is not None else None


def _symbol_of(node: SyntaxNode) -> tuple[str | None, str | None]:
    kind = node.kind
    if kind == "function_definition":
        return _declarator_identifier(node), "function"
    if kind == "declaration":
        kind_name = "function" if _has_child_kind(node, "function_declarator") else "variable"
        return _declarator_identifier(node), kind_name
    if kind == "type_definition":
        return _field_text(node, "declarator"), "typedef"
    if kind in _NAMED_BY_FIELD:
        return _field_text(node, "name"), _NAMED_BY_FIELD[kind]
    return None, None


def extract_comments(root: SyntaxNode, file_path: str) -> list[CommentInfo]:
    """Every comment, with the definition directly following it if any."""
    comments: list[CommentInfo] = []
    for node in root.walk():
        if node.kind != "comment" or not node.text:
            continue
        sibling = node.next_named_sibling()
        symbol, symbol_kind = _symbol_of(sibling) if sibling is not None else (None, None)
        comments.append(
            CommentInfo(
                file_path=file_path,
                text=node.text,
                kind=classify_comment(node.text),
                start_line=node.start_point[0],
                start_column=node.start_point[1],
                end_line=node.end_point[0],
                end_column=node.end_point[1],
                associated_symbol=symbol,
                associated_symbol_kind=symbol_kind,
            )
        )
    return comments