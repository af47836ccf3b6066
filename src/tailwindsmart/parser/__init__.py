from tailwindsmart.parser.classes import build_token, parse_class_string
from tailwindsmart.parser.tokenizer import tokenize, tokenize_spans
from tailwindsmart.parser.variants import Decomposition, decompose, split_variants

__all__ = [
    "build_token",
    "parse_class_string",
    "tokenize",
    "tokenize_spans",
    "Decomposition",
    "decompose",
    "split_variants",
]
