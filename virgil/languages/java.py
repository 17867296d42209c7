"""Symbol, import and comment extraction for Java syntax trees."""

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
    "class_declaration": SymbolKind.CLASS,
    "record_declaration": SymbolKind.CLASS,
    "interface_declaration": SymbolKind.INTERFACE,
    "annotation_type_declaration": SymbolKind.INTERFACE,
    "enum_declaration": SymbolKind.ENUM,
    "method_declaration": SymbolKind.METHOD,
    "constructor_declaration": SymbolKind.METHOD,
    "field_declaration": SymbolKind.VARIABLE,
}

_COMMENT_SYMBOL_KIND: dict[str, str] = {
    "class_declaration": "class",
    "record_declaration": "class",
    "interface_declaration": "interface",
    "annotation_type_declaration": "interface",
    "enum_declaration": "enum",
    "method_declaration": "method",
    "constructor_declaration": "method",
}

_COMMENT_NODE_KINDS = frozenset({"line_comment", "block_comment"})


def _in_field(node: SyntaxNode, field: str, kind: str | None = None) -> Iterator[SyntaxNode]:
    return (
        c
        for c in node.children
        if c.field_name == field and (kind is None or c.kind == kind)
    )


def _definition_names(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Name nodes of every definition pattern that ``node`` matches."""
    if node.kind == "field_declaration":
        for declarator in _in_field(node, "declarator", "variable_declarator"):
            yield from _in_field(declarator, "name", "identifier")
    elif node.kind in _KIND_BY_NODE:
        yield from _in_field(node, "name", "identifier")


def _is_exported(node: SyntaxNode) -> bool:
    for modifiers in (c for c in node.children if c.kind == "modifiers"):
        for modifier in modifiers.children:
            if modifier.text == "public":
                return True
            if modifier.text in ("private", "protected"):
                return False
    # Package-private is not visible outside the package.
    return False


def extract_symbols(root: SyntaxNode, file_path: str) -> list[SymbolInfo]:
    """Types, methods, constructors and fields defined in a Java tree."""
    symbols: list[SymbolInfo] = []
    for node in root.walk():
        kind = _KIND_BY_NODE.get(node.kind)
        if kind is None:
            continue
        for name_node in _definition_names(node):
            if not name_node.text:
                continue
            symbols.append(
                SymbolInfo(
                    name=name_node.text,
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


def _strip_prefix(text: str, prefix: str) -> str:
    return text[len(prefix):] if text.startswith(prefix) else text


def parse_java_import(text: str) -> tuple[str, str, bool]:
    """Split an import declaration into ``(module, imported_name, is_static)``."""
    text = _strip_prefix(text.strip(), "import").strip()
    is_static = text.startswith("static")
    if is_static:
        text = _strip_prefix(text, "static").strip()
    if text.endswith(";"):
        text = text[:-1]
    text = text.strip()
    if not text:
        return "", "", is_static
    imported_name = "*" if text.endswith(".*") else text.rsplit(".", 1)[-1]
    return text, imported_name, is_static


def extract_imports(root: SyntaxNode, file_path: str) -> list[ImportInfo]:
    """One import record per import declaration."""
    imports: list[ImportInfo] = []
    for node in root.walk():
        if node.kind != "import_declaration":
            continue
        module_specifier, imported_name, is_static = parse_java_import(node.text)
        if not module_specifier:
            continue
        imports.append(
            ImportInfo(
                source_file=file_path,
                module_specifier=module_specifier,
                imported_name=imported_name,
                local_name=imported_name,
                kind="static" if is_static else "import",
                is_type_only=False,
                line=node.start_point[0],
                # Java has no relative imports.
                is_external=True,
            )
        )
    return imports


def classify_comment(text: str) -> str:
    """Return ``doc``, ``block`` or ``line`` for a comment's text."""
    trimmed = text.lstrip()
    if trimmed.startswith("/**"):
        return "doc"
    if trimmed.startswith("/*"):
        return "block"
    return "line"


def _field_name(node: SyntaxNode) -> str | None:
    declarator = next((c for c in node.children if c.kind == "variable_declarator"), None)
    if declarator is None:
        return None
    name = declarator.child_by_field_name("name")
    return name.text if name is not None else None


def _symbol_of(node: SyntaxNode) -> tuple[str | None, str | None]:
    if node.kind == "field_declaration":
        return _field_name(node), "variable"
    kind_name = _COMMENT_SYMBOL_KIND.get(node.kind)
    if kind_name is None:
        return None, None
    name_node = node.child_by_field_name("name")
    return (name_node.text if name_node is not None else None), kind_name


def extract_comments(root: SyntaxNode, file_path: str) -> list[CommentInfo]:
    """Every comment, with the declaration directly following it if any."""
    comments: list[CommentInfo] = []
    for node in root.walk():
        if node.kind not in _COMMENT_NODE_KINDS or not node.text:
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