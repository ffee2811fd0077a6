#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import List, Optional

from tiny_types import TinyType


# ==========================
# AST definitions
# ==========================


@dataclass
class Node:
    line: int = field(default=0, compare=False, kw_only=True)


# --- statements ---

@dataclass
class Stmt(Node):
    pass


# A statement sequence is a plain list owned by the enclosing construct
# (the program itself, an if-branch, a repeat body).
StmtList = List[Stmt]


@dataclass
class DeclStmt(Stmt):
    name: str
    declared_type: TinyType


@dataclass
class AssignStmt(Stmt):
    name: str
    value: "Expr"


@dataclass
class ReadStmt(Stmt):
    name: str


@dataclass
class WriteStmt(Stmt):
    value: "Expr"


@dataclass
class IfStmt(Stmt):
    cond: "Expr"
    then_body: StmtList
    else_body: StmtList = field(default_factory=list)


@dataclass
class RepeatStmt(Stmt):
    body: StmtList
    cond: "Expr"


# --- expressions ---

RELATIONAL_OPS = ("=", "<")


@dataclass
class Expr(Node):
    # Resolved type, stamped by the type checker.
    type: Optional[TinyType] = field(default=None, compare=False, kw_only=True)


@dataclass
class OpExpr(Expr):
    op: str
    left: Expr
    right: Expr

    @property
    def is_relational(self) -> bool:
        return self.op in RELATIONAL_OPS


@dataclass
class ConstExpr(Expr):
    """A literal; its type is fixed when the node is built."""
    value: int
    type: Optional[TinyType] = field(default=TinyType.INTEGER, compare=False, kw_only=True)


@dataclass
class IdExpr(Expr):
    name: str
