"""Shared argument handling for CLI commands."""

from __future__ import annotations

import click


def read_classes(classes: tuple[str, ...]) -> str:
    """Join CLI arguments into one class string; ``-`` reads stdin instead."""
    if classes == ("-",):
        return click.get_text_stream("stdin").read()
    return " ".join(classes)
