"""
Tests for the symbol table builder pass: declarations, slots, uses and
scope errors.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from conftest import has_error_code, error_kinds
from tiny_analysis import AnalysisResult
from tiny_ast import DeclStmt, AssignStmt, ReadStmt, WriteStmt, IfStmt, RepeatStmt, OpExpr, ConstExpr, IdExpr
from tiny_context import CompilationContext, LogLevel
from tiny_diagnostics import AnalysisStage, SemanticError
from tiny_symtab_builder import build_symtab
from tiny_types import TinyType


def _build(program) -> AnalysisResult:
    result = AnalysisResult(root=program, context=CompilationContext(log_level=LogLevel.SILENT))
    build_symtab(result)
    return result


def test_declarations_get_consecutive_slots():
    result = _build([
        DeclStmt("a", TinyType.INTEGER, line=1),
        DeclStmt("b", TinyType.CHAR, line=2),
        DeclStmt("c", TinyType.BOOLEAN, line=3),
    ])

    assert not result.has_failed()
    assert [(e.name, e.slot, e.type) for e in result.symtab] == [
        ("a", 0, TinyType.INTEGER),
        ("b", 1, TinyType.CHAR),
        ("c", 2, TinyType.BOOLEAN),
    ]


def test_redefinition_keeps_first_declaration():
    result = _build([
        DeclStmt("x", TinyType.INTEGER, line=1),
        DeclStmt("x", TinyType.CHAR, line=2),
    ])

    assert result.has_failed()
    assert error_kinds(result.diagnostics) == [SemanticError.REDEFINITION]
    assert has_error_code(result.diagnostics, "SYM-0010")
    diag = result.diagnostics[0]
    assert diag.line == 2
    assert diag.stage is AnalysisStage.SYMTAB
    assert "'x'" in diag.message

    assert result.symtab.lookup("x") == 0
    assert result.symtab.type_of("x") is TinyType.INTEGER
    # the failed redeclaration does not count as a reference
    assert result.symtab.get("x").lines == [1]


def test_slots_are_not_consumed_by_failed_redeclarations():
    result = _build([
        DeclStmt("a", TinyType.INTEGER, line=1),
        DeclStmt("a", TinyType.INTEGER, line=2),
        DeclStmt("b", TinyType.INTEGER, line=3),
        DeclStmt("b", TinyType.CHAR, line=4),
        DeclStmt("c", TinyType.CHAR, line=5),
    ])

    assert [e.slot for e in result.symtab] == [0, 1, 2]
    assert error_kinds(result.diagnostics) == [SemanticError.REDEFINITION, SemanticError.REDEFINITION]


def test_undefined_assignment_target_is_reported_and_not_inserted():
    result = _build([
        AssignStmt("y", ConstExpr(1, line=1), line=1),
    ])

    assert error_kinds(result.diagnostics) == [SemanticError.UNDEFINED_REFERENCE]
    assert has_error_code(result.diagnostics, "SYM-0020")
    assert result.diagnostics[0].line == 1
    assert result.symtab.lookup("y") is None
    assert len(result.symtab) == 0


def test_undefined_read_and_identifier_are_reported():
    result = _build([
        ReadStmt("a", line=1),
        WriteStmt(IdExpr("b", line=2), line=2),
    ])

    assert error_kinds(result.diagnostics) == [
        SemanticError.UNDEFINED_REFERENCE,
        SemanticError.UNDEFINED_REFERENCE,
    ]
    assert [d.line for d in result.diagnostics] == [1, 2]


def test_undefined_name_reported_once_per_run():
    result = _build([
        ReadStmt("n", line=1),
        WriteStmt(IdExpr("n", line=2), line=2),
        AssignStmt("n", IdExpr("n", line=3), line=3),
    ])

    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].line == 1


def test_uses_append_reference_lines_in_preorder():
    result = _build([
        DeclStmt("x", TinyType.INTEGER, line=1),
        ReadStmt("x", line=2),
        AssignStmt("x", OpExpr("+", IdExpr("x", line=3), ConstExpr(1, line=3), line=3), line=3),
        RepeatStmt(
            [WriteStmt(IdExpr("x", line=5), line=5)],
            OpExpr("<", IdExpr("x", line=6), ConstExpr(0, line=6), line=6),
            line=4,
        ),
    ])

    assert not result.has_failed()
    assert result.symtab.get("x").lines == [1, 2, 3, 3, 5, 6]


def test_declaration_inside_if_branch_is_global():
    result = _build([
        IfStmt(
            OpExpr("=", ConstExpr(1, line=1), ConstExpr(1, line=1), line=1),
            [DeclStmt("t", TinyType.INTEGER, line=2)],
            [DeclStmt("e", TinyType.CHAR, line=4)],
            line=1,
        ),
        WriteStmt(IdExpr("t", line=5), line=5),
        WriteStmt(IdExpr("e", line=6), line=6),
    ])

    assert not result.has_failed()
    assert result.symtab.lookup("t") == 0
    assert result.symtab.lookup("e") == 1


def test_builder_leaves_expression_types_alone():
    ident = IdExpr("x", line=2)
    op = OpExpr("+", ident, ConstExpr(1, line=2), line=2)
    _build([
        DeclStmt("x", TinyType.INTEGER, line=1),
        WriteStmt(op, line=2),
    ])

    assert ident.type is None
    assert op.type is None
