# virgil

Tools for reading the structure of a codebase. The package provides:

- a table of source languages and the file extensions that belong to them;
- extractors that take a syntax tree of C, C#, Go or Java code and return
  the symbols it defines, the imports it makes and the comments it holds.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Languages

`virgil.language.Language` is an enum of the supported languages. It maps
file extensions to languages:

```python
from virgil.language import Language, parse_language_filter

Language.from_extension("hpp")       # Language.CPP
Language.from_extension("rb")        # None
Language.PYTHON.all_extensions()     # ("py", "pyi")
Language.C.extension()               # "c"
Language.CSHARP.as_str()             # "csharp"
Language.all()                       # every language, in declaration order
parse_language_filter("ts, js, rb")  # [Language.TYPESCRIPT, Language.JAVASCRIPT]
```

`parse_language_filter` splits on commas, trims each part and skips any
extension it does not know.

## Syntax trees

The extractors walk trees built from `virgil.languages.base.SyntaxNode`.
Each node has a `kind`, its `text`, zero-based `start_point` and
`end_point` pairs of `(row, column)`, a list of `children`, the
`field_name` it hangs under in its parent, and an `is_named` flag
(unnamed nodes stand for punctuation and keywords). A node offers
`child_by_field_name`, `next_named_sibling`, `named_children` and `walk`,
which yields the node and all its descendants depth first in source order.

```python
from virgil.languages.base import SyntaxNode
from virgil.languages import c_lang

identifier = SyntaxNode("identifier", text="main", field_name="declarator")
declarator = SyntaxNode("function_declarator", field_name="declarator",
                        children=[identifier])
function = SyntaxNode("function_definition", text="int main() { return 0; }",
                      children=[declarator])
root = SyntaxNode("translation_unit", children=[function])

symbols = c_lang.extract_symbols(root, "main.c")
# [SymbolInfo(name="main", kind=SymbolKind.FUNCTION, file_path="main.c", ...,
#             is_exported=True)]
```

## Extraction

Each of `virgil.languages.c_lang`, `csharp`, `go` and `java` has:

- `extract_symbols(root, file_path)`: a list of `SymbolInfo` with the name,
  `SymbolKind`, start and end positions, and whether the symbol is
  exported;
- `extract_imports(root, file_path)`: a list of `ImportInfo` with the module
  specifier, imported and local names, import kind, line, and whether the
  import is external;
- `extract_comments(root, file_path)`: a list of `CommentInfo` with the
  text, kind (`line`, `block` or `doc`; Go has no `doc`), position, and the
  name and kind of the definition that directly follows the comment, if any;
- `classify_comment(text)`: the comment kind for a piece of comment text.

Export rules differ by language:

- C: a function or variable is exported unless it is declared `static`.
  Types and macros are always exported.
- C#: a `public` or `internal` modifier exports a symbol, and a `private` or
  `protected` one does not. A symbol without one of these modifiers is not
  exported. Namespaces are always exported.
- Go: a name is exported when its first letter is upper case.
- Java: a `public` modifier exports a symbol. A `private` or `protected`
  one, or no modifier at all, does not.

Some helpers work on plain text:

```python
from virgil.languages import c_lang, csharp, java

c_lang.strip_include_path("<stdio.h>")                      # "stdio.h"
csharp.extract_using_namespace("using Console = System.Console;")  # "System.Console"
java.parse_java_import("import static java.lang.Math.PI;")  # ("java.lang.Math.PI", "PI", True)
```

The extractors mark C `#include <...>` directives as external and
`#include "..."` directives as internal. They mark every C#, Go and Java
import as external.

## What the package does not do

- It does not parse source text. You must build the `SyntaxNode` tree
  yourself, for example from the output of a parser of your choice.
- It does not walk directories to find source files. `Language` only maps
  extensions to languages.
- Symbol extraction covers only C, C#, Go and Java. The other languages in
  `Language` have no extractor.
- It has no command-line program and does not store its results anywhere.
  The extractors return Python lists.