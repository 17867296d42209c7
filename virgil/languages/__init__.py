"""Syntax tree nodes and per-language extraction for C, C#, Go and Java."""

__all__ = ["base", "c_lang", "csharp", "go", "java"]