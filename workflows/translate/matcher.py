"""Match requested target languages against an article's language links.

The source row always comes first and is built from the resolved article,
since language links never include the source edition. Every other requested
language gets exactly one row, in the order requested, found or not.
"""

import bisect
from typing import Sequence

from wiki_tools.wikipedia import LangLink, ResolvedArticle

from .models import NOT_FOUND_LABEL, ReportRow

LABEL_WIDTH = 30
ELLIPSIS = "..."


def truncate_label(text: str, width: int = LABEL_WIDTH) -> str:
    """Cut text to width characters, ending in "..." when shortened."""
    if len(text) <= width:
        return text
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def _found_row(link: LangLink) -> ReportRow:
    return ReportRow(lang=link.lang, label=truncate_label(link.display_title), url=link.url)


def _missing_row(lang: str) -> ReportRow:
    return ReportRow(lang=lang, label=NOT_FOUND_LABEL, url="", found=False)


def _source_row(article: ResolvedArticle, source_language: str) -> ReportRow:
    return ReportRow(lang=source_language, label=article.title, url=article.url)


def match(
    article: ResolvedArticle,
    sorted_links: Sequence[LangLink],
    requested: Sequence[str],
    source_language: str,
) -> list[ReportRow]:
    """Build report rows using binary search over links sorted by language.

    Args:
        article: Resolved source-language article
        sorted_links: Language links, ascending by lang
        requested: Target language codes in display order
        source_language: Code of the article's own edition

    Returns:
        Source row followed by one row per requested non-source language
    """
    codes = [link.lang for link in sorted_links]
    rows = [_source_row(article, source_language)]
    for lang in requested:
        if lang == source_language:
            continue
        i = bisect.bisect_left(codes, lang)
        if i < len(codes) and codes[i] == lang:
            rows.append(_found_row(sorted_links[i]))
        else:
            rows.append(_missing_row(lang))
    return rows


def match_linear(
    article: ResolvedArticle,
    links: Sequence[LangLink],
    requested: Sequence[str],
    source_language: str,
) -> list[ReportRow]:
    """Reference implementation of match() using a linear scan."""
    rows = [_source_row(article, source_language)]
    for lang in requested:
        if lang == source_language:
            continue
        link = next((link for link in links if link.lang == lang), None)
        rows.append(_found_row(link) if link else _missing_row(lang))
    return rows


def format_row(row: ReportRow) -> str:
    """Render a row as `<code>: <label padded to 30> <url>`."""
    if not row.found:
        return f"{row.lang}: {NOT_FOUND_LABEL}"
    return f"{row.lang}: {row.label:<{LABEL_WIDTH}} {row.url}"
