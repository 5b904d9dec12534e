"""Command line interface.

Usage:
    gbstranslator translate "program { Poner(Rojo) }" -f es -t en
    gbstranslator to-tokens -i main.gbs -f es -o main.abstract
    gbstranslator from-tokens -i main.abstract -t en -n @names.json --include-names
    gbstranslator locales -L @locales.json

Exit Codes:
    0   Success
    1   Translation or configuration error
    2   Usage error (reported by argparse)
    3   Input/output error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from gbstranslator import __version__
from gbstranslator.constants import DEFAULT_ENCODING, DEFAULT_TOKEN_PREFIX, DEFAULT_TOKEN_SUFFIX
from gbstranslator.core.babel_compat import is_babel_available
from gbstranslator.diagnostics import (
    DefinitionLoadError,
    DiagnosticFormatter,
    OutputFormat,
    TranslationError,
)
from gbstranslator.enums import Direction
from gbstranslator.loading import load_locale_definitions, load_name_overrides
from gbstranslator.locale_utils import best_match, display_name, get_system_locale
from gbstranslator.locales import LocaleRegistry
from gbstranslator.translation import Translator, TranslatorConfig

__all__ = ["EXIT_ERROR", "EXIT_IO", "EXIT_OK", "EXIT_USAGE", "build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_IO = 3

_COMMANDS: dict[str, Direction] = {
    "translate": Direction.TRANSLATE,
    "to-tokens": Direction.TO_TOKENS,
    "from-tokens": Direction.FROM_TOKENS,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="gbstranslator",
        description="Translate Gobstones code between natural-language locales.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spanish to English, code given inline:
  gbstranslator translate "program { Poner(Rojo) }" -f es -t en

  # Abstract (locale independent) form of a file:
  gbstranslator to-tokens -i main.gbs -f es -o main.abstract

  # Rename procedures too:
  gbstranslator translate -i main.gbs -f es -t en -n @names.json --include-names
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    common.add_argument(
        "-L",
        "--locales",
        metavar="JSON|@FILE",
        help="Extra locale definitions, e.g. '{\"fr\": {\"extends\": \"en\"}}'",
    )
    common.add_argument(
        "--prefix",
        default=DEFAULT_TOKEN_PREFIX,
        help="Prefix of abstract tokens (default: %(default)s)",
    )
    common.add_argument(
        "--suffix",
        default=DEFAULT_TOKEN_SUFFIX,
        help="Suffix of abstract tokens (default: %(default)s)",
    )

    inputs = argparse.ArgumentParser(add_help=False)
    inputs.add_argument("code", nargs="?", help="Code to translate (default: --in or stdin)")
    inputs.add_argument(
        "-i", "--in", dest="input", type=Path, metavar="FILE", help="Read code from FILE"
    )
    inputs.add_argument(
        "-o", "--out", dest="output", type=Path, metavar="FILE", help="Write result to FILE"
    )
    inputs.add_argument(
        "-n",
        "--names",
        metavar="JSON|@FILE",
        help="Identifier overrides, e.g. '{\"Poner__Veces\": \"Drop__Times\"}'",
    )
    inputs.add_argument(
        "--include-names",
        action="store_true",
        help="Apply the identifier overrides given with --names",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    translate = subparsers.add_parser(
        "translate", parents=[common, inputs], help="Translate code from one locale to another"
    )
    translate.add_argument("-f", "--from", dest="source", required=True, help="Source locale")
    translate.add_argument(
        "-t", "--to", dest="destination", required=True, help="Destination locale"
    )

    to_tokens = subparsers.add_parser(
        "to-tokens", parents=[common, inputs], help="Convert localized code to abstract tokens"
    )
    to_tokens.add_argument("-f", "--from", dest="source", required=True, help="Source locale")

    from_tokens = subparsers.add_parser(
        "from-tokens", parents=[common, inputs], help="Convert abstract tokens to localized code"
    )
    from_tokens.add_argument(
        "-t", "--to", dest="destination", required=True, help="Destination locale"
    )

    subparsers.add_parser("locales", parents=[common], help="List registered locales")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "locales":
            return _list_locales(args)
        if args.code is not None and args.input is not None:
            parser.error("give either CODE or --in, not both")
        return _run_translation(args)
    except DefinitionLoadError as e:
        _report(e)
        return EXIT_IO if isinstance(e.__cause__, OSError) else EXIT_ERROR
    except TranslationError as e:
        _report(e)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("I/O failure", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO


def _run_translation(args: argparse.Namespace) -> int:
    direction = _COMMANDS[args.command]
    names = load_name_overrides(args.names) if args.names is not None else None
    locales = load_locale_definitions(args.locales) if args.locales is not None else None
    translator = Translator(
        TranslatorConfig(
            source=getattr(args, "source", None),
            destination=getattr(args, "destination", None),
            names=names,
            locales=locales,
            token_prefix=args.prefix,
            token_suffix=args.suffix,
        )
    )

    code = _read_code(args)
    match direction:
        case Direction.TRANSLATE:
            result = translator.translate(code, args.include_names)
        case Direction.TO_TOKENS:
            result = translator.to_tokens(code, args.include_names)
        case Direction.FROM_TOKENS:
            result = translator.from_tokens(code, args.include_names)

    if args.output is not None:
        args.output.write_text(result, encoding=DEFAULT_ENCODING)
        logger.debug("Wrote %d chars to %s", len(result), args.output)
    else:
        print(result, end="" if result.endswith("\n") else "\n")
    return EXIT_OK


def _read_code(args: argparse.Namespace) -> str:
    if args.code is not None:
        return str(args.code)
    if args.input is not None:
        path: Path = args.input
        return path.read_text(encoding=DEFAULT_ENCODING)
    return sys.stdin.read()


def _list_locales(args: argparse.Namespace) -> int:
    locales = load_locale_definitions(args.locales) if args.locales is not None else None
    registry = LocaleRegistry.with_builtins(
        locales, token_prefix=args.prefix, token_suffix=args.suffix
    )
    system = get_system_locale()
    current = best_match(system, registry.names()) if system is not None else None
    with_display_names = is_babel_available()

    for name in registry.names():
        marker = "*" if name == current else " "
        line = f"{marker} {name:<8}"
        if with_display_names and (label := display_name(name)) is not None:
            line += f" {label}"
        if (base := registry.extends(name)) is not None:
            line += f" (extends {base})"
        print(line.rstrip())
    return EXIT_OK


def _report(error: TranslationError) -> None:
    if error.diagnostic is None:
        print(f"error: {error}", file=sys.stderr)
        return
    formatter = DiagnosticFormatter(output_format=OutputFormat.RUST)
    print(formatter.format(error.diagnostic), file=sys.stderr)
