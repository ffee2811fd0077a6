"""
Generic syntax-tree traversal shared by the analysis passes.

`traverse` applies `pre_proc` in preorder and `post_proc` in postorder; each
pass supplies its own pair of callbacks and passes `null_proc` for the side
it does not need.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from typing import Callable, List, Optional, Sequence, Union

from tiny_ast import (
    Node, DeclStmt, AssignStmt, ReadStmt, WriteStmt, IfStmt, RepeatStmt,
    OpExpr, ConstExpr, IdExpr)
from tiny_internal_error import InternalCompilerError

NodeProc = Callable[[Node], None]

# A child slot holds nothing, a single node, or a statement sequence.
ChildSlot = Union[None, Node, Sequence[Node]]


def null_proc(node: Node) -> None:
    pass


def child_slots(node: Node) -> List[ChildSlot]:
    """Return the child slots of `node` in their fixed visiting order."""
    if isinstance(node, AssignStmt):
        return [node.value]
    if isinstance(node, WriteStmt):
        return [node.value]
    if isinstance(node, IfStmt):
        return [node.cond, node.then_body, node.else_body]
    if isinstance(node, RepeatStmt):
        return [node.body, node.cond]
    if isinstance(node, OpExpr):
        return [node.left, node.right]
    if isinstance(node, (DeclStmt, ReadStmt, ConstExpr, IdExpr)):
        return []
    raise InternalCompilerError(
        f"[ICE-0010] no child layout for node kind '{type(node).__name__}'",
        getattr(node, "line", None),
    )


def traverse(root: ChildSlot, pre_proc: NodeProc, post_proc: NodeProc) -> None:
    """
    Walk `root` (a node, a statement sequence, or None).

    For every node: `pre_proc` runs first, then each child slot is fully
    traversed in order, then `post_proc` runs; only afterwards is the next
    statement of the enclosing sequence visited.
    """
    if root is None:
        return
    if isinstance(root, Node):
        _traverse_node(root, pre_proc, post_proc)
        return
    for node in root:
        _traverse_node(node, pre_proc, post_proc)


def _traverse_node(node: Optional[Node], pre_proc: NodeProc, post_proc: NodeProc) -> None:
    if node is None:
        return
    pre_proc(node)
    for slot in child_slots(node):
        traverse(slot, pre_proc, post_proc)
    post_proc(node)
