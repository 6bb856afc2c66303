"""Translate a search term via Wikipedia language links.

Usage:
    from workflows.translate import translate

    rows = translate("aardvark", settings)
    for row in rows:
        print(format_row(row))
"""

import logging
from typing import Optional

from core.config import WikiConfig
from core.settings import Settings, normalize
from wiki_tools.wikipedia import WikipediaClient, get_lang_links, resolve_title

from .matcher import match
from .models import ReportRow

logger = logging.getLogger(__name__)


def translate(
    query: str,
    settings: Settings,
    client: Optional[WikipediaClient] = None,
    config: Optional[WikiConfig] = None,
) -> list[ReportRow]:
    """Resolve query in the source language and report its equivalents.

    Runs title search, then language link lookup, then matching, strictly in
    sequence. Any lookup error propagates and no partial report is produced.

    Args:
        query: Free-text search term
        settings: Source and target languages (normalized here)
        client: Optional client; one is created and closed if not given
        config: Client configuration used when no client is given

    Returns:
        Source row followed by one row per other target language
    """
    settings = normalize(settings)
    source = settings.source_language
    logger.info(f"Translating {query!r} from {source} to {settings.target_languages}")

    owns_client = client is None
    client = client or WikipediaClient(config)
    try:
        article = resolve_title(client, source, query)
        links = get_lang_links(client, source, article.title)
    finally:
        if owns_client:
            client.close()

    rows = match(article, links, settings.target_languages, source)
    found = sum(1 for row in rows[1:] if row.found)
    logger.info(f"Matched {found}/{len(rows) - 1} target languages for {article.title!r}")
    return rows
