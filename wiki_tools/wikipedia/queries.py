"""Title search and language link lookups against Wikipedia.

Both lookups are single synchronous requests with no retry. Errors are
terminal for the caller:
    - TransportError: the request itself failed
    - ProtocolError: the response has an unexpected shape
    - NotFoundError: the response is well-formed but holds no match
"""

import logging

from core.errors import NotFoundError, ProtocolError

from .client import WikipediaClient
from .models import LangLink, ResolvedArticle
from .parsing import describe_shape, parse_lang_links, parse_pages, parse_string_lists

logger = logging.getLogger(__name__)

# https://www.mediawiki.org/wiki/API:Opensearch
OPENSEARCH_PARAMS = {
    "action": "opensearch",
    "format": "json",
    "redirects": "resolve",
    "limit": "1",
}

# https://www.mediawiki.org/wiki/API:Langlinks
LANGLINKS_PARAMS = {
    "action": "query",
    "format": "json",
    "prop": "langlinks",
    "llprop": "url",
    "lllimit": "max",
}

OPENSEARCH_ENVELOPE_SIZE = 4


def resolve_title(client: WikipediaClient, source_language: str, query: str) -> ResolvedArticle:
    """Find the best-matching article for a free-text query.

    The opensearch response is `[query, [titles], [descriptions], [urls]]`;
    the first title and first URL win.

    Args:
        client: Wikipedia API client
        source_language: Edition to search (e.g. "en")
        query: Free-text search term

    Returns:
        ResolvedArticle with the canonical title and its URL
    """
    payload = client.get_json(source_language, {**OPENSEARCH_PARAMS, "search": query})
    envelope = parse_string_lists(payload)

    if len(envelope) != OPENSEARCH_ENVELOPE_SIZE:
        shape = describe_shape(payload)
        raise ProtocolError(
            f"Malformed response. Expected {OPENSEARCH_ENVELOPE_SIZE} elements, got: {shape}",
            shape,
        )

    titles, urls = envelope[1], envelope[3]
    if not titles or not urls:
        raise NotFoundError(query, source_language)

    article = ResolvedArticle(title=titles[0], url=urls[0])
    logger.info(f"Resolved {query!r} to {article.title!r} ({source_language})")
    return article


def get_lang_links(client: WikipediaClient, source_language: str, title: str) -> list[LangLink]:
    """Fetch the known equivalents of an article in other languages.

    The source language itself never appears in the result. Links are
    returned sorted ascending by language code.

    Args:
        client: Wikipedia API client
        source_language: Edition the title belongs to
        title: Exact article title, as returned by resolve_title

    Returns:
        LangLinks sorted by language code
    """
    payload = client.get_json(source_language, {**LANGLINKS_PARAMS, "titles": title})
    pages = parse_pages(payload)
    if not pages:
        raise NotFoundError(title, source_language)

    # one title requested, so the first and only entry is the article
    page = next(iter(pages.values()))
    links = parse_lang_links(page)
    links.sort(key=lambda link: link.lang)
    logger.info(f"Found {len(links)} language links for {title!r}")
    return links
