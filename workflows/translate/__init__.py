"""
Term translation workflow.

Resolves a search term to a Wikipedia article and reports the article's
title in each requested target language.
"""

from .matcher import format_row, match, match_linear, truncate_label
from .models import NOT_FOUND_LABEL, ReportRow
from .pipeline import translate

__all__ = [
    "translate",
    "ReportRow",
    "NOT_FOUND_LABEL",
    "match",
    "match_linear",
    "format_row",
    "truncate_label",
]
