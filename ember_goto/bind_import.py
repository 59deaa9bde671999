"""Binding of a local symbol to the module specifier that imports it."""

import logging
from typing import Any

import tree_sitter
import tree_sitter_javascript

logger = logging.getLogger(__name__)


def make_parser() -> tree_sitter.Parser:
    """Create a JavaScript parser for one request."""
    language = tree_sitter.Language(tree_sitter_javascript.language())
    return tree_sitter.Parser(language)


def _text(node: Any, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _local_names(clause: Any, source: bytes) -> list[str]:
    """List the local names an import clause introduces."""
    names = []
    for child in clause.children:
        if child.type == "identifier":
            # Default import: import Foo from "module"
            names.append(_text(child, source))
        elif child.type == "named_imports":
            # Named imports: import { foo, bar as baz } from "module"
            for specifier in child.children:
                if specifier.type != "import_specifier":
                    continue
                local = specifier.child_by_field_name("alias")
                if local is None:
                    local = specifier.child_by_field_name("name")
                if local is not None:
                    names.append(_text(local, source))
        elif child.type == "namespace_import":
            # Namespace import: import * as foo from "module"
            names.extend(
                _text(n, source) for n in child.children if n.type == "identifier"
            )
    return names


def _module_specifier(statement: Any, source: bytes) -> str | None:
    node = statement.child_by_field_name("source")
    if node is None:
        return None
    return _text(node, source).strip("'\"")


def find_import_source(source_text: str, symbol_name: str) -> str | None:
    """Return the specifier of the top-level import binding symbol_name, if any."""
    source = source_text.encode("utf-8")
    tree = make_parser().parse(source)

    for statement in tree.root_node.children:
        if statement.type != "import_statement":
            continue
        for clause in statement.children:
            if clause.type == "import_clause" and symbol_name in _local_names(
                clause, source
            ):
                return _module_specifier(statement, source)
    return None


def bind_import(source_text: str, symbol_name: str) -> str:
    """Map a symbol to its import specifier, falling back to the symbol itself."""
    if symbol_name.startswith("."):
        return symbol_name
    specifier = find_import_source(source_text, symbol_name)
    if specifier is None:
        logger.debug("No import binds %r, using raw text", symbol_name)
        return symbol_name
    logger.debug("Bound %r to %r", symbol_name, specifier)
    return specifier
