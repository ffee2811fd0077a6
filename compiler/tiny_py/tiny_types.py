#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from enum import Enum
from typing import Optional

# ========================================
# The primitive type system for TINY.
# ========================================


class TinyType(Enum):
    """
    Closed set of TINY types.

    VOID is a placeholder used before a declaration's type is known; it is never
    a legal type for a checked expression. UNKNOWN is given to identifiers whose
    name was never declared, and satisfies every later check.
    """
    INTEGER = "Integer"
    CHAR = "Char"
    BOOLEAN = "Boolean"
    VOID = "Void"
    UNKNOWN = "<unknown>"


# Types an arithmetic or relational operator may be applied to.
OPERAND_TYPES = (TinyType.INTEGER, TinyType.CHAR)

# Types `write` can print.
WRITABLE_TYPES = (TinyType.INTEGER, TinyType.CHAR)


def is_unknown(t: Optional[TinyType]) -> bool:
    return t is None or t is TinyType.UNKNOWN


# --- type stringification for diagnostics and dumps ---

def format_type(t: Optional[TinyType]) -> str:
    if t is None:
        return "<none>"
    return t.value
