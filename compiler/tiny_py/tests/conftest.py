#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tiny_context import CompilationContext, LogLevel
from tiny_driver import TinyAnalyzer


@pytest.fixture
def context() -> CompilationContext:
    return CompilationContext(log_level=LogLevel.SILENT)


@pytest.fixture
def analyze_program(context: CompilationContext):
    """Run both analysis passes over a hand-built program.

    Usage:
        def test_something(analyze_program):
            result = analyze_program([
                DeclStmt("x", TinyType.INTEGER, line=1),
                WriteStmt(IdExpr("x", line=2), line=2),
            ])
            assert not result.has_failed()
    """

    def _analyze(root):
        return TinyAnalyzer(context).analyze(root)

    return _analyze


def has_error_code(diagnostics, code: str) -> bool:
    """Check if any diagnostic contains the given error code.

    Args:
        diagnostics: List of Diagnostic objects
        code: Error code string like "TYP-0010" or "[TYP-0010]"

    Returns:
        True if any diagnostic message contains the error code
    """
    if not code.startswith("["):
        code = f"[{code}]"
    return any(code in d.message for d in diagnostics)


def error_kinds(diagnostics):
    """The SemanticError of each diagnostic, in report order."""
    return [d.error for d in diagnostics]
