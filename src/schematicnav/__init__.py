"""Schematic Navigation - natural-language commands for a live web page."""

from schematicnav.domains.navigation import (
    ExecutionResult,
    Intent,
    IntentDispatcher,
    IntentKind,
    SymbolicConfiguration,
    execute,
)

__all__ = [
    "ExecutionResult",
    "Intent",
    "IntentDispatcher",
    "IntentKind",
    "SymbolicConfiguration",
    "execute",
]

__version__ = "0.1.0"
