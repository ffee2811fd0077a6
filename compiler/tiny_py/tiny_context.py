"""
Compilation context for cross-cutting analyzer options.

This module defines the CompilationContext dataclass which holds options
that affect both analysis passes (logging, tracing).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for the TINY analyzer."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages
    INFO = 10       # General progress messages
    DEBUG = 30      # Detailed diagnostic information


@dataclass
class CompilationContext:
    """
    Holds cross-cutting options that affect multiple analysis stages.

    Attributes:
        trace_analyze:      If True, dump the symbol table and the annotated AST
                            once analysis finishes.
        log_rich_format:    If True, emit logs in rich format: may include log level, timestamps, etc.
        log_level:          Current logging level.
    """
    trace_analyze: bool = False
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'CompilationContext':
        """Create a CompilationContext with default settings."""
        return CompilationContext(log_level=LogLevel.WARNING)
