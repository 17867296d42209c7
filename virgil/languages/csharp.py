"""Symbol, using-directive and comment extraction for C# syntax trees."""

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
    "struct_declaration": SymbolKind.STRUCT,
    "interface_declaration": SymbolKind.INTERFACE,
    "enum_declaration": SymbolKind.ENUM,
    "method_declaration": SymbolKind.METHOD,
    "constructor_declaration": SymbolKind.METHOD,
    "namespace_declaration": SymbolKind.NAMESPACE,
    "property_declaration": SymbolKind.PROPERTY,
    "delegate_declaration": SymbolKind.TYPE_ALIAS,
    "field_declaration": SymbolKind.VARIABLE,
}

# Node kinds whose name is the ``name`` field, with the name node kinds accepted.
_NAME_FIELD_KINDS: dict[str, frozenset[str]] = {
    "class_declaration": frozenset({"identifier"}),
    "struct_declaration": frozenset({"identifier"}),
    "interface_declaration": frozenset({"identifier"}),
    "enum_declaration": frozenset({"identifier"}),
    "record_declaration": frozenset({"identifier"}),
    "method_declaration": frozenset({"identifier"}),
    "constructor_declaration": frozenset({"identifier"}),
    "namespace_declaration": frozenset({"identifier", "qualified_name"}),
    "property_declaration": frozenset({"identifier"}),
    "delegate_declaration": frozenset({"identifier"}),
}

_COMMENT_SYMBOL_KIND: dict[str, str] = {
    "class_declaration": "class",
    "record_declaration": "class",
    "struct_declaration": "struct",
    "interface_declaration": "interface",
    "enum_declaration": "enum",
    "method_declaration": "method",
    "constructor_declaration": "method",
    "namespace_declaration": "namespace",
    "property_declaration": "property",
    "delegate_declaration": "type_alias",
}


def _children_of_kind(node: SyntaxNode, kind: str) -> Iterator[SyntaxNode]:
    return (c for c in node.children if c.kind == kind)


def _field_identifiers(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Identifiers declared by a field: declaration > declarator > identifier."""
    for declaration in _children_of_kind(node, "variable_declaration"):
        for declarator in _children_of_kind(declaration, "variable_declarator"):
            yield from _children_of_kind(declarator, "identifier")


def _definition_names(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Name nodes of every definition pattern that ``node`` matches."""
    accepted = _NAME_FIELD_KINDS.get(node.kind)
    if accepted is not None:
        yield from (
            c for c in node.children if c.field_name == "name" and c.kind in accepted
        )
    elif node.kind == "field_declaration":
        yield from _field_identifiers(node)


def _is_exported(node: SyntaxNode) -> bool:
    if node.kind == "namespace_declaration":
        return True
    for child in _children_of_kind(node, "modifier"):
        if child.text in ("public", "internal"):
            return True
        if child.text in ("private", "protected"):
            return False
    return False


def extract_symbols(root: SyntaxNode, file_path: str) -> list[SymbolInfo]:
    """Types, members, namespaces and delegates defined in a C# tree."""
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


def extract_using_namespace(text: str) -> str:
    """The namespace or type named by a ``using`` directive's text."""
    text = _strip_prefix(text.strip(), "using").strip()
    text = _strip_prefix(text, "static").strip()
    if text.endswith(";"):
        text = text[:-1]
    text = text.strip()
    _alias, sep, target = text.partition("=")
    if sep:
        return target.strip()
    return text


def extract_imports(root: SyntaxNode, file_path: str) -> list[ImportInfo]:
    """One import record per ``using`` directive."""
    imports: list[ImportInfo] = []
    for node in root.walk():
        if node.kind != "using_directive":
            continue
        module_specifier = extract_using_namespace(node.text)
        if not module_specifier:
            continue
        imports.append(
            ImportInfo(
                source_file=file_path,
                module_specifier=module_specifier,
                imported_name="*",
                local_name="*",
                kind="using",
                is_type_only=False,
                line=node.start_point[0],
                # Nothing in the syntax tells library namespaces from local ones.
                is_external=True,
            )
        )
    return imports


def classify_comment(text: str) -> str:
    """Return ``doc``, ``block`` or ``line`` for a comment's text."""
    trimmed = text.lstrip()
    if trimmed.startswith(("///", "/**")):
        return "doc"
    if trimmed.startswith("/*"):
        return "block"
    return "line"


def _symbol_of(node: SyntaxNode) -> tuple[str | None, str | None]:
    if node.kind == "field_declaration":
        name = next((n.text for n in _field_identifiers(node)), None)
        return name, "variable"
    kind_name = _COMMENT_SYMBOL_KIND.get(node.kind)
    if kind_name is None:
        return None, None
    name_node = node.child_by_field_name("name")
    return (name_node.text if name_node is not None else None), kind_name


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