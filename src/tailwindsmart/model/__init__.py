"""tailwindsmart model layer -- public type re-exports."""

from tailwindsmart.model.category import Category, Classification, CssProperty, UNCLASSIFIED
from tailwindsmart.model.conflict import Conflict, ConflictKind
from tailwindsmart.model.diagnostic import Diagnostic, Severity
from tailwindsmart.model.result import VALID, Invalid, IssueKind, Valid, ValidationResult
from tailwindsmart.model.token import ClassToken, TokenSpan
from tailwindsmart.model.variant import VARIANT_RULES, VariantKind, VariantRule, lookup_variant

__all__ = [
    # category
    "Category",
    "Classification",
    "CssProperty",
    "UNCLASSIFIED",
    # token
    "ClassToken",
    "TokenSpan",
    # variant
    "VariantKind",
    "VariantRule",
    "VARIANT_RULES",
    "lookup_variant",
    # result
    "IssueKind",
    "ValidationResult",
    "Valid",
    "Invalid",
    "VALID",
    # conflict
    "ConflictKind",
    "Conflict",
    # diagnostic
    "Severity",
    "Diagnostic",
]
