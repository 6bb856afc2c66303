"""
Wikipedia lookups: title search and language links.

Provides: resolve_title, get_lang_links, WikipediaClient
"""

from .client import WikipediaClient
from .models import LangLink, ResolvedArticle
from .queries import get_lang_links, resolve_title

__all__ = [
    "WikipediaClient",
    "LangLink",
    "ResolvedArticle",
    "resolve_title",
    "get_lang_links",
]
