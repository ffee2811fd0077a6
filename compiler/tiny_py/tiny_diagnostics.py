#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tiny_ast import Node
from tiny_context import CompilationContext
from tiny_logger import log_debug


DIAGNOSTIC_CODE_FAMILIES = {
    "SYM": [
        "SYM-0010",  # redefinition
        "SYM-0020",  # undefined reference
    ],
    "TYP": [
        "TYP-0010",  # operand type mismatch
        "TYP-0011",  # invalid operand type
        "TYP-0020",  # read of non-integer
        "TYP-0030",  # if test not Boolean
        "TYP-0040",  # assignment type mismatch
        "TYP-0050",  # invalid write type
        "TYP-0060",  # repeat test not Boolean
    ],
}


class AnalysisStage(Enum):
    SYMTAB = "symtab"
    TYPECHECK = "typecheck"


class SemanticError(Enum):
    REDEFINITION = "Redefinition"
    UNDEFINED_REFERENCE = "UndefinedReference"
    OPERAND_TYPE_MISMATCH = "OperandTypeMismatch"
    INVALID_OPERAND_TYPE = "InvalidOperandType"
    NON_BOOLEAN_CONDITION = "NonBooleanCondition"
    NON_INTEGER_READ = "NonIntegerRead"
    INVALID_WRITE_TYPE = "InvalidWriteType"
    ASSIGNMENT_TYPE_MISMATCH = "AssignmentTypeMismatch"


@dataclass
class Diagnostic:
    kind: str  # always "error" for semantic violations
    message: str  # includes the "[XXX-NNNN]" code prefix
    error: Optional[SemanticError] = None
    stage: Optional[AnalysisStage] = None
    line: Optional[int] = None

    @property
    def code(self) -> Optional[str]:
        if self.message.startswith("[") and "]" in self.message:
            return self.message[1:self.message.index("]")]
        return None

    def format(self) -> str:
        loc = f"line {self.line}: " if self.line is not None else ""
        return f"{loc}{self.kind}: {self.message}"


def diag_from_node(
        kind: str,
        message: str,
        *,
        error: Optional[SemanticError],
        stage: Optional[AnalysisStage],
        node: Optional[Node],
) -> Diagnostic:
    return Diagnostic(
        kind=kind,
        message=message,
        error=error,
        stage=stage,
        line=node.line if node is not None else None,
    )


@dataclass
class DiagnosticSink:
    """
    Run-scoped collector shared by both analysis passes.

    Reporting never raises and never stops a traversal; the first error sets
    the failed flag, which stays set for the rest of the run.
    """
    context: CompilationContext = field(default_factory=CompilationContext.default)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    failed: bool = False

    def report(
            self,
            node: Optional[Node],
            message: str,
            *,
            error: SemanticError,
            stage: AnalysisStage,
    ) -> Diagnostic:
        diag = diag_from_node("error", message, error=error, stage=stage, node=node)
        self.diagnostics.append(diag)
        self.failed = True
        log_debug(self.context, f"Reported {diag.format()}")
        return diag

    def has_failed(self) -> bool:
        return self.failed

    def errors_for(self, stage: AnalysisStage) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.stage is stage]
