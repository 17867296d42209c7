import pytest

from virgil.languages.base import SymbolKind, SyntaxNode
from virgil.languages.java import (
    classify_comment,
    extract_comments,
    extract_imports,
    extract_symbols,
    parse_java_import,
)


def kw(word):
    return SyntaxNode(word, text=word, is_named=False)


def ident(name, field="name"):
    return SyntaxNode("identifier", text=name, field_name=field)


def modifiers(*words):
    return SyntaxNode("modifiers", text=" ".join(words), children=[kw(w) for w in words])


def decl(kind, keyword, name, *mods, body=(), start=(0, 0), end=(0, 0)):
    children = [modifiers(*mods)] if mods else []
    children += [
        kw(keyword),
        ident(name),
        SyntaxNode("class_body", children=list(body), field_name="body"),
    ]
    return SyntaxNode(kind, children=children, start_point=start, end_point=end)


def method(name, *mods, kind="method_declaration"):
    children = [modifiers(*mods)] if mods else []
    children += [
        ident(name),
        SyntaxNode("formal_parameters", text="()", field_name="parameters"),
        SyntaxNode("block", text="{ }", field_name="body"),
    ]
    return SyntaxNode(kind, children=children)


def field(name, *mods):
    children = [modifiers(*mods)] if mods else []
    children += [
        SyntaxNode("integral_type", text="int", field_name="type"),
        SyntaxNode(
            "variable_declarator",
            children=[ident(name)],
            field_name="declarator",
        ),
        kw(";"),
    ]
    return SyntaxNode("field_declaration", children=children)


def program(*children):
    return SyntaxNode("program", children=list(children))


def find(syms, name):
    return next(s for s in syms if s.name == name)


def imports_of(text):
    root = program(SyntaxNode("import_declaration", text=text))
    return extract_imports(root, "Test.java")


def test_extract_class():
    syms = extract_symbols(program(decl("class_declaration", "class", "Foo", "public")), "Test.java")
    s = find(syms, "Foo")
    assert s.kind == SymbolKind.CLASS
    assert s.is_exported
    assert s.file_path == "Test.java"


def test_extract_private_class():
    syms = extract_symbols(program(decl("class_declaration", "class", "Foo", "private")), "Test.java")
    assert not find(syms, "Foo").is_exported


def test_extract_package_private_class():
    syms = extract_symbols(program(decl("class_declaration", "class", "Foo")), "Test.java")
    assert not find(syms, "Foo").is_exported


def test_extract_interface():
    syms = extract_symbols(
        program(decl("interface_declaration", "interface", "Foo", "public")), "Test.java"
    )
    s = find(syms, "Foo")
    assert s.kind == SymbolKind.INTERFACE
    assert s.is_exported


def test_extract_enum():
    syms = extract_symbols(program(decl("enum_declaration", "enum", "Color", "public")), "Test.java")
    assert find(syms, "Color").kind == SymbolKind.ENUM


def test_extract_method():
    tree = program(
        decl("class_declaration", "class", "Foo", "public", body=[method("bar", "public")])
    )
    m = find(extract_symbols(tree, "Test.java"), "bar")
    assert m.kind == SymbolKind.METHOD
    assert m.is_exported


def test_extract_constructor():
    tree = program(
        decl(
            "class_declaration",
            "class",
            "Foo",
            "public",
            body=[method("Foo", "public", kind="constructor_declaration")],
        )
    )
    syms = extract_symbols(tree, "Test.java")
    ctors = [s for s in syms if s.name == "Foo" and s.kind == SymbolKind.METHOD]
    assert len(ctors) == 1


def test_extract_field():
    tree = program(
        decl("class_declaration", "class", "Foo", "public", body=[field("count", "private")])
    )
    f = find(extract_symbols(tree, "Test.java"), "count")
    assert f.kind == SymbolKind.VARIABLE
    assert not f.is_exported


def test_extract_record():
    syms = extract_symbols(
        program(decl("record_declaration", "record", "Point", "public")), "Test.java"
    )
    assert find(syms, "Point").kind == SymbolKind.CLASS


def test_extract_annotation_type():
    syms = extract_symbols(
        program(decl("annotation_type_declaration", "@interface", "MyAnnotation", "public")),
        "Test.java",
    )
    assert find(syms, "MyAnnotation").kind == SymbolKind.INTERFACE


def test_symbol_positions_come_from_definition():
    tree = program(decl("class_declaration", "class", "Foo", start=(3, 2), end=(5, 1)))
    s = find(extract_symbols(tree, "Test.java"), "Foo")
    assert (s.start_line, s.start_column, s.end_line, s.end_column) == (3, 2, 5, 1)


def test_empty_source_no_symbols():
    assert extract_symbols(program(), "Test.java") == []


def test_simple_import():
    imports = imports_of("import java.util.List;")
    assert len(imports) == 1
    assert imports[0].module_specifier == "java.util.List"
    assert imports[0].imported_name == "List"
    assert imports[0].local_name == "List"
    assert imports[0].kind == "import"
    assert imports[0].is_external


def test_wildcard_import():
    imports = imports_of("import java.util.*;")
    assert len(imports) == 1
    assert imports[0].module_specifier == "java.util.*"
    assert imports[0].imported_name == "*"


def test_static_import():
    imports = imports_of("import static java.lang.Math.PI;")
    assert len(imports) == 1
    assert imports[0].module_specifier == "java.lang.Math.PI"
    assert imports[0].imported_name == "PI"
    assert imports[0].kind == "static"


def test_empty_import_skipped():
    assert imports_of("import ;") == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("import java.util.List;", ("java.util.List", "List", False)),
        ("import java.util.*;", ("java.util.*", "*", False)),
        ("import static java.lang.Math.PI;", ("java.lang.Math.PI", "PI", True)),
        ("import ;", ("", "", False)),
    ],
)
def test_parse_java_import(text, expected):
    assert parse_java_import(text) == expected


def test_line_comment():
    tree = program(
        SyntaxNode("line_comment", text="// a line comment"),
        decl("class_declaration", "class", "Foo"),
    )
    comments = extract_comments(tree, "Test.java")
    c = next(c for c in comments if "a line comment" in c.text)
    assert c.kind == "line"


def test_block_comment():
    tree = program(
        SyntaxNode("block_comment", text="/* block comment */"),
        decl("class_declaration", "class", "Foo"),
    )
    c = next(c for c in extract_comments(tree, "Test.java") if "block comment" in c.text)
    assert c.kind == "block"


def test_doc_comment():
    tree = program(
        SyntaxNode("block_comment", text="/** Javadoc */"),
        decl("class_declaration", "class", "Foo", "public"),
    )
    c = next(c for c in extract_comments(tree, "Test.java") if "Javadoc" in c.text)
    assert c.kind == "doc"


def test_comment_associated_symbol():
    tree = program(
        SyntaxNode("block_comment", text="/** Describes Foo */"),
        decl("class_declaration", "class", "Foo", "public"),
    )
    c = next(c for c in extract_comments(tree, "Test.java") if "Describes Foo" in c.text)
    assert c.associated_symbol == "Foo"
    assert c.associated_symbol_kind == "class"


def test_comment_before_field_associates_variable():
    body = [SyntaxNode("line_comment", text="// counter"), field("count", "private")]
    tree = program(decl("class_declaration", "class", "Foo", body=body))
    c = next(c for c in extract_comments(tree, "Test.java") if c.text == "// counter")
    assert (c.associated_symbol, c.associated_symbol_kind) == ("count", "variable")


def test_trailing_comment_has_no_symbol():
    tree = program(SyntaxNode("line_comment", text="// end"))
    [c] = extract_comments(tree, "Test.java")
    assert c.associated_symbol is None
    assert c.associated_symbol_kind is None


@pytest.mark.parametrize(
    "text, kind",
    [("/** doc */", "doc"), ("/* block */", "block"), ("// line", "line"), ("/// x", "line")],
)
def test_classify_comment(text, kind):
    assert classify_comment(text) == kind