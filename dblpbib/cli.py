"""Command line interface.

    dblpbib get DBLP:conf/cpaior/JabsBJ24
    dblpbib get-all paper.tex > dblp.bib

BibTeX goes to stdout, diagnostics to stderr. Exit status is 0 on success,
1 when some keys are unknown to DBLP and 2 on a fatal error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional, Sequence

from loguru import logger

from dblpbib.bibtex import render_bibliography
from dblpbib.config import LOGGING, RESOLVER, DblpServerConfig
from dblpbib.dblp.client import DblpClient, DblpError, UnknownKeyError, strip_key_prefix
from dblpbib.fixers.pipeline import FixupOptions
from dblpbib.fixers.unicode import UnmappedCharacterError
from dblpbib.latex.aux import AuxParseError, collect_dblp_keys
from dblpbib.resolver import resolve_key, resolve_keys

EXIT_OK = 0
EXIT_UNKNOWN_KEYS = 1
EXIT_FATAL = 2


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="Keep unicode characters instead of converting them to LaTeX",
    )
    parser.add_argument(
        "--crossref",
        action="store_true",
        help="Emit crossref style entries with separate proceedings/book entries",
    )
    parser.add_argument(
        "--all-externals",
        action="store_true",
        help="Keep every DOI and URL instead of a single external link",
    )
    parser.add_argument(
        "--dont-expand-journals",
        action="store_true",
        help="Keep DBLP's abbreviated journal names",
    )
    parser.add_argument(
        "--escape-quotes",
        action="store_true",
        help="Write double quotes as '' (ignored with --unicode)",
    )
    parser.add_argument(
        "--no-trailing-comma",
        action="store_true",
        help="Omit the comma after the last field of each entry",
    )
    server = parser.add_mutually_exclusive_group()
    server.add_argument(
        "--trier",
        action="store_true",
        help="Use the dblp.uni-trier.de mirror",
    )
    server.add_argument(
        "--dblp-domain",
        metavar="URL",
        help="Use a custom DBLP server, e.g. https://dblp.dagstuhl.de",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="More log output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dblpbib",
        description="Fetch clean BibTeX entries from DBLP",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="Print the BibTeX entry of one DBLP key")
    get.add_argument("key", help="DBLP key, with or without the DBLP: prefix")
    _add_common_arguments(get)

    get_all = commands.add_parser("get-all", help="Print BibTeX for every DBLP key cited by a LaTeX document")
    get_all.add_argument("path", help="The .tex or .aux file, or the job name")
    get_all.add_argument(
        "-j",
        "--concurrent-requests",
        type=int,
        default=RESOLVER.CONCURRENT_REQUESTS,
        metavar="N",
        help=f"Maximum number of concurrent DBLP requests (default: {RESOLVER.CONCURRENT_REQUESTS})",
    )
    get_all.add_argument(
        "-f",
        "--no-follow-inputs",
        action="store_true",
        help="Do not read .aux files pulled in with \\@input",
    )
    _add_common_arguments(get_all)

    return parser


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    """Send log records to stderr at the level picked by the switches."""
    if quiet:
        level = "ERROR"
    elif verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = LOGGING.LEVEL
    logger.remove()
    logger.add(sys.stderr, level=level)


def fixup_options(args: argparse.Namespace) -> FixupOptions:
    return FixupOptions(
        unicode=args.unicode,
        all_externals=args.all_externals,
        crossref=args.crossref,
        expand_journals=not args.dont_expand_journals,
        escape_quotes=args.escape_quotes,
    )


def _report_unknown(keys: Sequence[str]) -> None:
    print(f"{len(keys)} key(s) unknown to DBLP:", file=sys.stderr)
    for key in keys:
        print(f"  - {key}", file=sys.stderr)


async def _run(args: argparse.Namespace) -> int:
    options = fixup_options(args)
    server = DblpServerConfig.for_args(trier=args.trier, domain=args.dblp_domain)
    trailing_comma = not args.no_trailing_comma

    if args.command == "get":
        async with DblpClient(server) as client:
            try:
                records = await resolve_key(client, args.key, options)
            except UnknownKeyError as e:
                logger.debug(str(e))
                _report_unknown([strip_key_prefix(args.key)])
                return EXIT_UNKNOWN_KEYS
        print(render_bibliography(records, trailing_comma=trailing_comma))
        return EXIT_OK

    keys = collect_dblp_keys(args.path, follow_inputs=not args.no_follow_inputs)
    async with DblpClient(server) as client:
        result = await resolve_keys(client, keys, options, concurrency=args.concurrent_requests)
    records = result.ordered()
    if records:
        print(render_bibliography(records, trailing_comma=trailing_comma))
    logger.info(f"Wrote {len(records)} BibTeX entries")

    if result.unknown:
        _report_unknown(result.unknown)
        return EXIT_UNKNOWN_KEYS
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    if args.command == "get-all" and args.concurrent_requests < 1:
        logger.error("--concurrent-requests must be at least 1")
        return EXIT_FATAL

    try:
        return asyncio.run(_run(args))
    except (DblpError, UnmappedCharacterError, AuxParseError, OSError) as e:
        logger.error(str(e))
        return EXIT_FATAL


if __name__ == "__main__":
    raise SystemExit(main())
