#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from tiny_internal_error import InternalCompilerError
from tiny_types import TinyType, format_type


@dataclass
class SymbolEntry:
    """
    A declared TINY variable.

    slot  : storage location, assigned in declaration order and never reused
    lines : every line that declares or references the name, in visiting order
    """
    name: str
    type: TinyType
    slot: int
    lines: List[int] = field(default_factory=list)


class SymbolTable:
    """
    Flat, whole-program namespace: name -> SymbolEntry.

    Entries are never removed. One table belongs to one analysis run; it owns
    the slot counter, so a fresh table always starts allocating at slot 0.
    """

    def __init__(self) -> None:
        # Dicts keep insertion order, which is declaration order here.
        self._entries: Dict[str, SymbolEntry] = {}
        self._next_slot: int = 0

    # --- classic single-call contract ---

    def insert(self, name: str, line: int, slot: int, typ: TinyType) -> None:
        """
        Declare `name` with `slot` and `typ`, or, if it is already present,
        only append `line` to its references (slot and type are ignored).

        A new entry's slot must not be below the next free slot.
        """
        entry = self._entries.get(name)
        if entry is not None:
            entry.lines.append(line)
            return
        if slot < self._next_slot:
            raise InternalCompilerError(
                f"[ICE-0023] slot {slot} for symbol '{name}' is already allocated "
                f"(next free slot is {self._next_slot})",
                line,
            )
        self._entries[name] = SymbolEntry(name=name, type=typ, slot=slot, lines=[line])
        self._next_slot = slot + 1

    # --- explicit operations ---

    def declare(self, name: str, line: int, typ: TinyType) -> SymbolEntry:
        if name in self._entries:
            raise InternalCompilerError(f"[ICE-0020] symbol '{name}' declared twice", line)
        entry = SymbolEntry(name=name, type=typ, slot=self._next_slot, lines=[line])
        self._entries[name] = entry
        self._next_slot += 1
        return entry

    def record_use(self, name: str, line: int) -> None:
        entry = self._entries.get(name)
        if entry is None:
            raise InternalCompilerError(f"[ICE-0021] use of undeclared symbol '{name}' recorded", line)
        entry.lines.append(line)

    def lookup(self, name: str) -> Optional[int]:
        """Return the slot of `name`, or None if it was never declared."""
        entry = self._entries.get(name)
        return entry.slot if entry is not None else None

    def type_of(self, name: str) -> TinyType:
        entry = self._entries.get(name)
        if entry is None:
            raise InternalCompilerError(f"[ICE-0022] type requested for undeclared symbol '{name}'")
        return entry.type

    def get(self, name: str) -> Optional[SymbolEntry]:
        return self._entries.get(name)

    @property
    def next_slot(self) -> int:
        return self._next_slot

    def dump(self) -> List[SymbolEntry]:
        return list(self._entries.values())

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())


def format_symbol_table(table: SymbolTable) -> str:
    """Render the trace listing of `table`, one row per entry in declaration order."""
    lines = [
        "Variable Name  Type      Location  Line Numbers",
        "-------------  ----      --------  ------------",
    ]
    for entry in table:
        refs = " ".join(f"{n:4d}" for n in entry.lines)
        lines.append(f"{entry.name:<14} {format_type(entry.type):<9} {entry.slot:<9} {refs}".rstrip())
    return "\n".join(lines)
