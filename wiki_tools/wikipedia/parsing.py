"""Data transformation functions for MediaWiki API responses."""

from typing import Any

from pydantic import ValidationError

from core.errors import ProtocolError

from .models import LangLink


def _describe_item(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return f"{type(value).__name__}[{len(value)}]"
    return type(value).__name__


def describe_shape(value: Any) -> str:
    """Summarize a decoded JSON value for error messages, e.g. "[str, list[1]]"."""
    if isinstance(value, list):
        return "[" + ", ".join(_describe_item(v) for v in value) + "]"
    return _describe_item(value)


def parse_string_lists(payload: Any) -> list[list[str]]:
    """Parse a response in the format of `[ string | [string, ...], ... ]`.

    Bare strings become one-element lists so every slot can be indexed the
    same way.

    Raises:
        ProtocolError: payload is not a list, or holds anything other than
            strings and lists of strings
    """
    if not isinstance(payload, list):
        raise ProtocolError(
            f"Expected a list but got {describe_shape(payload)}", describe_shape(payload)
        )

    str_lists: list[list[str]] = []
    for item in payload:
        if isinstance(item, str):
            str_lists.append([item])
        elif isinstance(item, list):
            for v in item:
                if not isinstance(v, str):
                    raise ProtocolError(
                        f"Expected a string but got {v!r}", describe_shape(payload)
                    )
            str_lists.append(list(item))
        else:
            raise ProtocolError(
                f"Expected string or list but got {item!r}", describe_shape(payload)
            )
    return str_lists


def parse_pages(payload: Any) -> dict[str, Any]:
    """Extract the `query.pages` map from an action=query response.

    A response without a pages map is treated as an empty map. API-level
    errors (an "error" object in the body) and non-object values raise
    ProtocolError.
    """
    if not isinstance(payload, dict):
        raise ProtocolError(
            f"Expected an object but got {describe_shape(payload)}", describe_shape(payload)
        )
    if "error" in payload:
        error = payload["error"]
        info = error.get("info") if isinstance(error, dict) else error
        raise ProtocolError(f"API error: {info}", error)

    query = payload.get("query") or {}
    if not isinstance(query, dict):
        raise ProtocolError(f"Expected query to be an object, got {describe_shape(query)}", query)
    pages = query.get("pages") or {}
    if not isinstance(pages, dict):
        raise ProtocolError(f"Expected pages to be an object, got {describe_shape(pages)}", pages)
    return pages


def parse_lang_links(page: Any) -> list[LangLink]:
    """Parse the langlinks list of a single page entry.

    A page without a langlinks key has no equivalents in other languages.
    """
    if not isinstance(page, dict):
        raise ProtocolError(f"Expected page to be an object, got {describe_shape(page)}", page)
    raw_links = page.get("langlinks", [])
    if not isinstance(raw_links, list):
        raise ProtocolError(
            f"Expected langlinks to be a list, got {describe_shape(raw_links)}", raw_links
        )
    try:
        return [LangLink.model_validate(link) for link in raw_links]
    except ValidationError as e:
        raise ProtocolError(f"Malformed langlink entry: {e}", describe_shape(raw_links)) from e
