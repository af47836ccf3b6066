"""tailwindsmart: a Tailwind CSS class-string engine.

Tokenizes class attributes, decomposes variant chains, classifies utilities,
detects conflicts and produces a canonical sort order. Pure functions over
strings; nothing here touches the file system or network.
"""

from __future__ import annotations

__version__ = "0.1.0"

from tailwindsmart.cache import CacheStats, ClassCache
from tailwindsmart.classify import classify
from tailwindsmart.config import TailwindSmartConfig
from tailwindsmart.conflicts import detect_conflicts
from tailwindsmart.errors import ConfigError, TailwindSmartError
from tailwindsmart.jit import parse_arbitrary
from tailwindsmart.model import (
    Category,
    ClassToken,
    Classification,
    Conflict,
    ConflictKind,
    CssProperty,
    Diagnostic,
    Invalid,
    IssueKind,
    Severity,
    Valid,
    ValidationResult,
)
from tailwindsmart.parser import decompose, parse_class_string, tokenize, tokenize_spans
from tailwindsmart.sorting import group_by_category, sort_classes
from tailwindsmart.validation import LintError, lint, lint_or_raise, validate_class

__all__ = [
    "__version__",
    # operations
    "tokenize",
    "tokenize_spans",
    "decompose",
    "parse_class_string",
    "classify",
    "detect_conflicts",
    "sort_classes",
    "group_by_category",
    "parse_arbitrary",
    "validate_class",
    "lint",
    "lint_or_raise",
    # types
    "Category",
    "Classification",
    "CssProperty",
    "ClassToken",
    "Conflict",
    "ConflictKind",
    "Diagnostic",
    "Severity",
    "IssueKind",
    "ValidationResult",
    "Valid",
    "Invalid",
    # infrastructure
    "ClassCache",
    "CacheStats",
    "TailwindSmartConfig",
    "TailwindSmartError",
    "ConfigError",
    "LintError",
]
