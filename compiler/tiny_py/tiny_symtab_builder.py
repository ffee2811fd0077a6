#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from typing import Set

from tiny_analysis import AnalysisResult
from tiny_ast import Node, DeclStmt, AssignStmt, ReadStmt, WriteStmt, IfStmt, RepeatStmt, OpExpr, ConstExpr, IdExpr
from tiny_diagnostics import AnalysisStage, SemanticError
from tiny_internal_error import InternalCompilerError
from tiny_traverse import traverse, null_proc


class SymbolTableBuilder:
    """
    Preorder pass that fills the run's symbol table.

    - Declarations take the next free slot, in traversal order.
    - Uses (assign target, read target, identifier in an expression) append
      their line to the entry's reference list.
    - Detects:
        * redeclaration of a name (the first declaration is kept)
        * use of a name that was never declared (reported at its first use)

    Never reads or writes the type annotations of expression nodes.
    """

    def __init__(self, analysis: AnalysisResult):
        self.analysis = analysis
        self.symtab = analysis.symtab
        self.sink = analysis.sink
        self._reported_undefined: Set[str] = set()

    def build(self) -> None:
        traverse(self.analysis.root, self._insert_node, null_proc)

    # --- per-node action ---

    def _insert_node(self, node: Node) -> None:
        if isinstance(node, DeclStmt):
            self._declare(node)
        elif isinstance(node, (AssignStmt, ReadStmt, IdExpr)):
            self._use(node, node.name)
        elif isinstance(node, (WriteStmt, IfStmt, RepeatStmt, OpExpr, ConstExpr)):
            return
        else:
            raise InternalCompilerError(
                f"[ICE-0030] symbol table builder cannot handle node kind '{type(node).__name__}'",
                node.line,
            )

    def _declare(self, node: DeclStmt) -> None:
        if self.symtab.lookup(node.name) is not None:
            self.sink.report(
                node,
                f"[SYM-0010] symbol '{node.name}' redefined",
                error=SemanticError.REDEFINITION,
                stage=AnalysisStage.SYMTAB,
            )
            return
        self.symtab.declare(node.name, node.line, node.declared_type)

    def _use(self, node: Node, name: str) -> None:
        if self.symtab.lookup(name) is not None:
            self.symtab.record_use(name, node.line)
            return
        if name in self._reported_undefined:
            return
        self._reported_undefined.add(name)
        self.sink.report(
            node,
            f"[SYM-0020] symbol '{name}' not defined",
            error=SemanticError.UNDEFINED_REFERENCE,
            stage=AnalysisStage.SYMTAB,
        )


def build_symtab(analysis: AnalysisResult) -> None:
    """Run the symbol table builder over `analysis.root`."""
    SymbolTableBuilder(analysis).build()
