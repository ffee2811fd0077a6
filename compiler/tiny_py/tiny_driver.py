#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from typing import Union

from tiny_analysis import AnalysisResult
from tiny_ast import Node, StmtList
from tiny_ast_printer import format_program
from tiny_context import CompilationContext
from tiny_logger import log_info, log_debug, log_stage
from tiny_symbols import format_symbol_table
from tiny_symtab_builder import SymbolTableBuilder
from tiny_type_checker import TypeChecker


class TinyAnalyzer:
    """
    Semantic-analysis driver:
      - build the symbol table (preorder pass)
      - type-check the tree (postorder pass)

    Every call to `analyze` starts from a fresh AnalysisResult, so repeated
    runs over the same tree never see each other's declarations, slots or
    failed flag.
    """

    def __init__(self, context: CompilationContext | None = None):
        self.context = context or CompilationContext.default()

    # --- Public API ---

    def analyze(self, root: Union[None, Node, StmtList]) -> AnalysisResult:
        """
        Run both passes to completion over `root`.

        Returns an AnalysisResult holding the symbol table and every
        diagnostic, builder errors first. When `has_failed()` is true the
        caller must not go on to code generation.
        """
        log_info(self.context, "Starting semantic analysis")
        result = AnalysisResult(root=root, context=self.context)

        # 1. Symbol table
        log_stage(self.context, "Building symbol table")
        builder = SymbolTableBuilder(result)
        builder.build()
        log_debug(self.context, f"Symbol table holds {len(result.symtab)} symbol(s); {len(result.diagnostics)} diagnostic(s) so far")
        if self.context.trace_analyze:
            log_info(self.context, "\nSymbol table:\n\n" + format_symbol_table(result.symtab))

        # 2. Types
        log_stage(self.context, "Checking types")
        before = len(result.diagnostics)
        checker = TypeChecker(result)
        checker.check()
        log_debug(self.context, f"Type checking produced {len(result.diagnostics) - before} diagnostic(s)")
        if self.context.trace_analyze and root is not None:
            log_info(self.context, "\nAnnotated syntax tree:\n\n" + format_program(root))

        log_info(self.context, f"Analysis complete: {len(result.diagnostics)} error(s)")
        return result


def analyze(root: Union[None, Node, StmtList], context: CompilationContext | None = None) -> AnalysisResult:
    """Shortcut for `TinyAnalyzer(context).analyze(root)`."""
    return TinyAnalyzer(context).analyze(root)
