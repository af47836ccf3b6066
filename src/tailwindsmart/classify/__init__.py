from tailwindsmart.classify.classifier import classify, resolve_color, strip_modifiers
from tailwindsmart.classify.tables import PREFIX_RULES, PrefixRule, match_prefix

__all__ = [
    "classify",
    "resolve_color",
    "strip_modifiers",
    "PREFIX_RULES",
    "PrefixRule",
    "match_prefix",
]
