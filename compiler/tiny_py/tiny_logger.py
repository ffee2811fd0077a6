"""
Logging utilities for the TINY analyzer.

This module provides logging functions that respect the CompilationContext
log level and format flags.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time
from typing import Optional

from tiny_context import CompilationContext, LogLevel


def log(context: Optional[CompilationContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's logging level admits it.

    Args:
        context:    The compilation context containing logging level.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        print("No context provided for logging.", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)


def log_info(context: Optional[CompilationContext], message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: Optional[CompilationContext], message: str) -> None:
    """
    Log a debug-level message if logging level is DEBUG or higher.

    Args:
        context: The compilation context containing logging level.
        message: The message to log.
    """
    log(context, LogLevel.DEBUG, message)


def log_stage(context: Optional[CompilationContext], stage: str) -> None:
    """
    Log the start of an analysis stage (e.g. "Building symbol table").
    """
    log(context, LogLevel.INFO, f"{stage}...")
