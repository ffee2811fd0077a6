#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import List, Optional, Union

from tiny_ast import Node, StmtList
from tiny_context import CompilationContext
from tiny_diagnostics import Diagnostic, DiagnosticSink
from tiny_symbols import SymbolTable


@dataclass
class AnalysisResult:
    """
    State and products of one semantic-analysis run.

    Contains:
      - compilation context (cross-cutting options)
      - the analyzed tree (expression nodes are annotated in place)
      - the symbol table, handed read-only to code generation afterwards
      - the diagnostic sink with the run's failed flag

    Every run gets a fresh instance; nothing here is shared between runs.
    """
    root: Union[None, Node, StmtList] = None
    context: CompilationContext = field(default_factory=CompilationContext.default)
    symtab: SymbolTable = field(default_factory=SymbolTable)
    sink: Optional[DiagnosticSink] = None

    def __post_init__(self) -> None:
        if self.sink is None:
            self.sink = DiagnosticSink(context=self.context)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.sink.diagnostics

    def has_failed(self) -> bool:
        return self.sink.has_failed()
