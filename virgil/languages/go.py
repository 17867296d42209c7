"""Symbol, import and comment extraction for Go syntax trees."""

from __future__ import annotations

from collections.abc import Iterator

from virgil.languages.base import (
    CommentInfo,
    ImportInfo,
    SymbolInfo,
    SymbolKind,
    SyntaxNode,
)

# Spec node kind -> (required parent kind, accepted name node kind).
_SPEC_PATTERNS: dict[str, tuple[str, str]] = {
    "type_spec": ("type_declaration", "type_identifier"),
    "const_spec": ("const_declaration", "identifier"),
    "var_spec": ("var_declaration", "identifier"),
}

_TYPE_KIND_BY_NODE: dict[str, SymbolKind] = {
    "struct_type": SymbolKind.STRUCT,
    "interface_type": SymbolKind.INTERFACE,
}

# Declaration kind -> (spec child kind, kind name for comments).
_GROUPED_DECLARATIONS: dict[str, tuple[str, str]] = {
    "const_declaration": ("const_spec", "constant"),
    "var_declaration": ("var_spec", "variable"),
}


def _in_field(node: SyntaxNode, field: str, kind: str | None = None) -> Iterator[SyntaxNode]:
    return (
        c
        for c in node.children
        if c.field_name == field and (kind is None or c.kind == kind)
    )


def _definition_names(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Name nodes of every definition pattern that ``node`` matches."""
    kind = node.kind
    if kind == "function_declaration":
        yield from _in_field(node, "name", "identifier")
    elif kind == "method_declaration":
        yield from _in_field(node, "name", "field_identifier")
    elif kind in _SPEC_PATTERNS:
        parent_kind, name_kind = _SPEC_PATTERNS[kind]
        if node.parent is not None and node.parent.kind == parent_kind:
            yield from _in_field(node, "name", name_kind)


def _type_spec_kind(node: SyntaxNode) -> SymbolKind:
    type_node = node.child_by_field_name("type")
    if type_node is None:
        return SymbolKind.TYPE_ALIAS
    return _TYPE_KIND_BY_NODE.get(type_node.kind, SymbolKind.TYPE_ALIAS)


def _determine_kind(node: SyntaxNode) -> SymbolKind | None:
    kind = node.kind
    if kind == "function_declaration":
        return SymbolKind.FUNCTION
    if kind == "method_declaration":
        return SymbolKind.METHOD
    if kind == "type_spec":
        return _type_spec_kind(node)
    if kind == "const_spec":
        return SymbolKind.CONSTANT
    if kind == "var_spec":
        return SymbolKind.VARIABLE
    return None


def _is_exported(name: str) -> bool:
    return name[:1].isupper()


def extract_symbols(root: SyntaxNode, file_path: str) -> list[SymbolInfo]:
    """Functions, methods, types, constants and variables in a Go tree."""
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
                    is_exported=_is_exported(name),
                )
            )
    return symbols


def _import_specs(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Import specs directly under a declaration or inside its spec list."""
    for child in node.children:
        if child.kind == "import_spec":
            yield child
        elif child.kind == "import_spec_list":
            yield from (c for c in child.children if c.kind == "import_spec")


def extract_imports(root: SyntaxNode, file_path: str) -> list[ImportInfo]:
    """One import record per import spec."""
    imports: list[ImportInfo] = []
    for node in root.walk():
        if node.kind != "import_declaration":
            continue
        for spec in _import_specs(node):
            for path_node in _in_field(spec, "path", "interpreted_string_literal"):
                module_specifier = path_node.text.strip('"')
                if not module_specifier:
                    continue
                imported_name = module_specifier.rsplit("/", 1)[-1]
                alias = spec.child_by_field_name("name")
                local_name = alias.text if alias is not None else imported_name
                imports.append(
                    ImportInfo(
                        source_file=file_path,
                        module_specifier=module_specifier,
                        imported_name=imported_name,
                        local_name=local_name,
                        kind="import",
                        is_type_only=False,
                        line=spec.start_point[0],
                        # Import paths carry no internal/external distinction.
                        is_external=True,
                    )
                )
    return imports


def classify_comment(text: str) -> str:
    """Return ``block`` or ``line`` for a comment's text."""
    return "block" if text.lstrip().startswith("/*") else "line"


def _field_text(node: SyntaxNode, field: str) -> str | None:
    child = node.child_by_field_name(field)
    return child.text if child is not None else None


def _symbol_of(node: SyntaxNode) -> tuple[str | None, str | None]:
    kind = node.kind
    if kind == "function_declaration":
        return _field_text(node, "name"), "function"
    if kind == "method_declaration":
        return _field_text(node, "name"), "method"
    if kind == "type_declaration":
        spec = next((c for c in node.children if c.kind == "type_spec"), None)
        if spec is None:
            return None, None
        return _field_text(spec, "name"), _type_spec_kind(spec).value
    if kind in _GROUPED_DECLARATIONS:
        spec_kind, kind_name = _GROUPED_DECLARATIONS[kind]
        spec = next((c for c in node.children if c.kind == spec_kind), None)
        if spec is None:
            return None, None
        return _field_text(spec, "name"), kind_name
    return None, None


def extract_comments(root: SyntaxNode, file_path: str) -> list[CommentInfo]:
    """Every comment, with the declaration directly following it if any."""
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