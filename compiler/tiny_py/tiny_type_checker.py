#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from __future__ import annotations

from typing import Optional

from tiny_analysis import AnalysisResult
from tiny_ast import Node, Expr, DeclStmt, AssignStmt, ReadStmt, WriteStmt, IfStmt, RepeatStmt, OpExpr, ConstExpr, IdExpr
from tiny_diagnostics import AnalysisStage, SemanticError
from tiny_internal_error import InternalCompilerError
from tiny_traverse import traverse, null_proc
from tiny_types import TinyType, OPERAND_TYPES, WRITABLE_TYPES, format_type, is_unknown


class TypeChecker:
    """Postorder pass that types every expression and checks every statement.

    Children are always typed before their parent, so each node only looks one
    level down. Resolved types are written to `Expr.type` in place.

    Names that were never declared resolve to UNKNOWN; any check touching an
    UNKNOWN type passes silently, since the builder already reported the name.
    """

    def __init__(self, analysis: AnalysisResult):
        self.analysis = analysis
        self.symtab = analysis.symtab
        self.sink = analysis.sink

    def check(self) -> None:
        traverse(self.analysis.root, null_proc, self._check_node)

    # ------------------------------------------------------------------
    # Per-node action
    # ------------------------------------------------------------------

    def _check_node(self, node: Node) -> None:
        if isinstance(node, OpExpr):
            self._check_op(node)
        elif isinstance(node, IdExpr):
            node.type = self._declared_type(node.name)
        elif isinstance(node, ConstExpr):
            # Typed when the node was built.
            return
        elif isinstance(node, ReadStmt):
            typ = self._declared_type(node.name)
            if not is_unknown(typ) and typ is not TinyType.INTEGER:
                self._error(
                    node,
                    f"[TYP-0020] read of non-integer type: '{node.name}' has type '{format_type(typ)}'",
                    SemanticError.NON_INTEGER_READ,
                )
        elif isinstance(node, IfStmt):
            if not self._is_boolean(node.cond):
                self._error(
                    node.cond,
                    f"[TYP-0030] if test is not Boolean: found '{format_type(node.cond.type)}'",
                    SemanticError.NON_BOOLEAN_CONDITION,
                )
        elif isinstance(node, AssignStmt):
            self._check_assign(node)
        elif isinstance(node, WriteStmt):
            typ = node.value.type
            if not is_unknown(typ) and typ not in WRITABLE_TYPES:
                self._error(
                    node.value,
                    f"[TYP-0050] write of non-integer and non-char type '{format_type(typ)}'",
                    SemanticError.INVALID_WRITE_TYPE,
                )
        elif isinstance(node, RepeatStmt):
            if not self._is_boolean(node.cond):
                self._error(
                    node.cond,
                    f"[TYP-0060] repeat test is not Boolean: found '{format_type(node.cond.type)}'",
                    SemanticError.NON_BOOLEAN_CONDITION,
                )
        elif isinstance(node, DeclStmt):
            return
        else:
            raise InternalCompilerError(
                f"[ICE-0040] type checker cannot handle node kind '{type(node).__name__}'",
                node.line,
            )

    def _check_op(self, node: OpExpr) -> None:
        left = node.left.type
        right = node.right.type
        if is_unknown(left) or is_unknown(right):
            pass
        elif left is not right:
            self._error(
                node,
                f"[TYP-0010] operator '{node.op}' applied to operands of different types "
                f"'{format_type(left)}' and '{format_type(right)}'",
                SemanticError.OPERAND_TYPE_MISMATCH,
            )
        elif left not in OPERAND_TYPES:
            self._error(
                node,
                f"[TYP-0011] operator '{node.op}' applied to invalid type '{format_type(left)}'",
                SemanticError.INVALID_OPERAND_TYPE,
            )

        # Arithmetic keeps the left operand's type, so Char arithmetic stays Char.
        if node.is_relational:
            node.type = TinyType.BOOLEAN
        else:
            node.type = left if left is not None else TinyType.UNKNOWN

    def _check_assign(self, node: AssignStmt) -> None:
        target = self._declared_type(node.name)
        value = node.value.type
        if is_unknown(target) or is_unknown(value):
            return
        if value is not target:
            self._error(
                node.value,
                f"[TYP-0040] assignment of different type: '{node.name}' has type "
                f"'{format_type(target)}' but the value has type '{format_type(value)}'",
                SemanticError.ASSIGNMENT_TYPE_MISMATCH,
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _declared_type(self, name: str) -> TinyType:
        if self.symtab.lookup(name) is None:
            return TinyType.UNKNOWN
        return self.symtab.type_of(name)

    def _is_boolean(self, expr: Expr) -> bool:
        return is_unknown(expr.type) or expr.type is TinyType.BOOLEAN

    def _error(self, node: Optional[Node], message: str, error: SemanticError) -> None:
        self.sink.report(node, message, error=error, stage=AnalysisStage.TYPECHECK)


def type_check(analysis: AnalysisResult) -> None:
    """Run the type checker over `analysis.root`."""
    TypeChecker(analysis).check()
