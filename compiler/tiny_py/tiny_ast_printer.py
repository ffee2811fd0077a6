#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import is_dataclass, fields
from typing import List, Any, Union

from tiny_ast import Node, Expr, StmtList
from tiny_types import TinyType, format_type

_ANNOTATION_FIELDS = ("line", "type")


def format_node(node: Any, indent: int = 0) -> List[str]:
    """
    Generic, reflection-based AST pretty-printer.

    - Shows the node class name.
    - Prints simple scalar fields inline (excluding `line` and `type`).
    - Recursively prints child Node / list-of-Node fields on new indented lines.
    - Appends the resolved type of expressions (`: Integer`) once the type
      checker has run, and the source line as `@N`.
    """
    ind = "  " * indent

    # Statement sequences: print each element at same indentation
    if isinstance(node, list):
        lines: List[str] = []
        for elem in node:
            lines.extend(format_node(elem, indent))
        return lines

    if isinstance(node, Node) and is_dataclass(node):
        data_fields = [f for f in fields(node) if f.name not in _ANNOTATION_FIELDS]
        simple_parts = []
        child_fields = []

        for f in data_fields:
            value = getattr(node, f.name)
            if isinstance(value, Node) or isinstance(value, list):
                child_fields.append((f.name, value))
            else:
                simple_parts.append((f.name, value))

        # Header: ClassName(field1=..., field2=...) : Type @line
        header = node.__class__.__name__
        if simple_parts:
            inner = ", ".join(f"{name}={_format_value(value)}" for name, value in simple_parts)
            header = f"{header}({inner})"
        if isinstance(node, Expr) and node.type is not None:
            header += f" : {format_type(node.type)}"
        header += f" @{node.line}"

        lines: List[str] = [ind + header]

        for name, value in child_fields:
            if isinstance(value, list):
                if not value:
                    continue
                lines.append(ind + "  " + f"{name}:")
                for elem in value:
                    lines.extend(format_node(elem, indent + 2))
            else:
                lines.append(ind + "  " + f"{name}:")
                lines.extend(format_node(value, indent + 2))

        return lines

    # Fallback for unexpected values
    return [ind + repr(node)]


def _format_value(value: Any) -> str:
    if isinstance(value, TinyType):
        return format_type(value)
    return repr(value)


def format_program(root: Union[Node, StmtList]) -> str:
    """
    Convenience: pretty-print a whole program (or a single node) as a string.
    """
    lines = format_node(root, indent=0)
    return "\n".join(lines)
