from tailwindsmart.validation.validator import (
    LintError,
    lint,
    lint_or_raise,
    validate_class,
    validate_classes,
)

__all__ = ["LintError", "lint", "lint_or_raise", "validate_class", "validate_classes"]
