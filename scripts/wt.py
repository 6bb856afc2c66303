#!/usr/bin/env python3
"""
Translate a term using Wikipedia's language links.

The term is looked up in the source language edition, and the matching
article's title is printed for every target language, with its URL.

Usage:
    wt egg salad                # translate 'egg salad' according to settings
    wt from=lv pelmeņi          # translate only this query from 'lv'
    wt from=en to=es,fr,de      # no query: update and save settings
    wt coelho from=pt -save     # translate from 'pt', saving 'from=pt'
    wt -settings                # print settings file path and contents
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import WikiConfig, get_wiki_config
from core.errors import WtError
from core.logging import configure_logging, end_run, reset_logging, start_run
from core.settings import SettingsStore, merge_overrides, render
from workflows.translate import format_row, translate

logger = logging.getLogger(__name__)

DESCRIPTION = "Translate a term using Wikipedia's language links feature."

EPILOG = """\
options:
  Options affect the current query. If the query is omitted, or if '-save'
  is given, options are saved to settings.

  from=CODE             set the search term language; add it to target languages
  to=CODE,CODE,...      set languages to translate to (replaces the list)

examples:
  wt -settings            # print current settings
  wt egg salad            # translate 'egg salad' according to settings
  wt from=lv pelmeņi      # translate only this query from 'lv', leaving settings intact
  wt from=en to=es,fr,de  # update 'from' and 'to' settings since no query was provided
  wt coelho from=pt -save # translate from 'pt', saving 'from=pt' to settings
"""

FROM_PREFIX = "from="
TO_PREFIX = "to="

# Every other token, dashed or not, is part of the query
FLAG_TOKENS = frozenset({"-save", "-settings", "-v", "--verbose", "-h", "--help"})


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wt",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-save",
        action="store_true",
        help="save the from/to options to the settings file",
    )
    parser.add_argument(
        "-settings",
        action="store_true",
        help="print the settings file path and contents",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="also write log messages to stderr",
    )
    parser.add_argument(
        "terms",
        nargs="*",
        metavar="TERM",
        help="from=/to= options and the words of the query",
    )
    return parser


def split_terms(terms: list[str]) -> tuple[Optional[str], Optional[list[str]], str]:
    """Separate from=/to= options from query words.

    Later options win over earlier ones. Codes in to= are comma-separated;
    surrounding whitespace and empty entries are dropped.

    Returns:
        (source, targets, query); source/targets are None when not given
    """
    source = None
    targets = None
    words = []
    for term in terms:
        if term.startswith(FROM_PREFIX):
            source = term[len(FROM_PREFIX):].strip()
        elif term.startswith(TO_PREFIX):
            codes = re.split(r"\s*,\s*", term[len(TO_PREFIX):].strip())
            targets = [code for code in codes if code]
        else:
            words.append(term)
    return source, targets, " ".join(words).strip()


def run(args: argparse.Namespace, store: SettingsStore, config: WikiConfig) -> int:
    source, targets, query = split_terms(args.terms)

    settings = merge_overrides(store.load(), source=source, targets=targets)
    if args.save:
        store.save(settings)
    if args.settings:
        print(f"{store.path}:")
        print(render(settings), end="")

    if not query:
        store.save(settings)
        return 0

    for row in translate(query, settings, config=config):
        print(format_row(row))
    return 0


def main(argv: Optional[list[str]] = None, store: Optional[SettingsStore] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = create_parser()
    args = parser.parse_args([arg for arg in argv if arg in FLAG_TOKENS])
    args.terms = [arg for arg in argv if arg not in FLAG_TOKENS]

    source, targets, query = split_terms(args.terms)
    if not query and source is None and targets is None and not (args.save or args.settings):
        parser.print_help()
        return 0

    config = get_wiki_config()
    configure_logging(verbose=args.verbose)
    start_run(f"wt-{'-'.join(argv)[:40]}")
    try:
        return run(args, store or SettingsStore(), config)
    except WtError as e:
        logger.error(f"{type(e).__name__}: {e.message}")
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    finally:
        end_run()
        reset_logging()


if __name__ == "__main__":
    sys.exit(main())
