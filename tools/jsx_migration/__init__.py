#!/usr/bin/env python3
# CUI // SP-CTI
"""JSX Pattern Migration Engine.

Recognizes structural React/JSX idioms in a Babel-compatible syntax tree and
emits Flutter skeletons plus a migration guide for each idiom.

Architecture: 3-stage pure pipeline:
  1. Detect (deterministic) - single pre-order traversal -> PatternCatalog
  2. Synthesize (deterministic) - PatternCatalog -> CodeSkeletonSet
  3. Describe (deterministic) - PatternCatalog -> Markdown guide
"""

from tools.jsx_migration.code_synthesizer import CodeSkeletonSet, synthesize
from tools.jsx_migration.migration_guide import describe
from tools.jsx_migration.pattern_catalog import Category, PatternCatalog
from tools.jsx_migration.pattern_config import PatternConfig, load_pattern_config
from tools.jsx_migration.pattern_detector import detect

__version__ = "0.1.0"

__all__ = [
    "Category",
    "CodeSkeletonSet",
    "PatternCatalog",
    "PatternConfig",
    "describe",
    "detect",
    "load_pattern_config",
    "synthesize",
]
