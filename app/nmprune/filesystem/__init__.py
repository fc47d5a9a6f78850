"""Filesystem scanning and removal module.

This module provides node_modules discovery, protected name handling,
result models, and deletion operations.
"""

from nmprune.filesystem.models import DeletionResult, MatchSet, RemovalOutcome, RemovalStatus
from nmprune.filesystem.protected import IGNORED_NAME_PATTERNS, SKIP_DIR_NAMES, is_ignored_name
from nmprune.filesystem.remover import NodeModulesRemover
from nmprune.filesystem.scanner import NodeModulesScanner

__all__ = [
    "IGNORED_NAME_PATTERNS",
    "SKIP_DIR_NAMES",
    "DeletionResult",
    "MatchSet",
    "NodeModulesRemover",
    "NodeModulesScanner",
    "RemovalOutcome",
    "RemovalStatus",
    "is_ignored_name",
]
