#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# tiny_internal_error.py
from __future__ import annotations

from typing import Optional


class InternalCompilerError(RuntimeError):
    """
    ICE = analyzer bug / violated pipeline invariant.
    Not for user mistakes (those are Diagnostics).
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def format(self) -> str:
        message = self.message
        if not "[ICE-" in message:
            message = f"[ICE-9999] {message}"
        if self.line is not None:
            return f"line {self.line}: internal compiler error: {message}"
        return f"internal compiler error: {message}"
