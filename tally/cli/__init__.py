"""
Tally CLI entry point.

Commands:
    tally compile [SOURCE] [-o OUT]   translate to pseudo-assembly
    tally tokens [SOURCE]             list lexer tokens
    tally ast [SOURCE]                dump the parsed program as JSON

SOURCE defaults to stdin; ``--sample`` uses the built-in sample program.
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence, Tuple

from tally import __version__
from tally.compiler import SAMPLE_PROGRAM, compile_unit
from tally.config import TallySettings, get_settings
from tally.errors import TallyError
from tally.lang.parser import Lexer
from tally.observability.logging import LEVEL_MAP, configure_logging, get_logger

from .errors import CLIError, CLIInputError, format_cli_error

logger = get_logger(__name__)


def _configure_logging(args: argparse.Namespace, settings: TallySettings) -> None:
    """Configure logging from the CLI flag, falling back to settings."""
    configure_logging(getattr(args, 'log_level', None) or settings.log_level)


def _effective_settings(args: argparse.Namespace) -> TallySettings:
    settings = get_settings()
    if getattr(args, 'positional', False):
        settings = settings.model_copy(update={'strict_shapes': False})
    return settings


def read_source(args: argparse.Namespace) -> Tuple[str, str]:
    """Return ``(source, path)`` for the requested input."""
    if getattr(args, 'sample', False):
        return SAMPLE_PROGRAM, "<sample>"

    if args.source in (None, '-'):
        return sys.stdin.read(), "<stdin>"

    path = Path(args.source)
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except FileNotFoundError as exc:
        raise CLIInputError(
            f"Source file not found: {path}",
            hint="Pass '-' or omit SOURCE to read from stdin",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIInputError(f"Cannot read {path}: {exc}") from exc


def cmd_compile(args: argparse.Namespace) -> int:
    source, path = read_source(args)
    compilation = compile_unit(source, path=path, settings=_effective_settings(args))

    if args.output:
        out = Path(args.output)
        try:
            out.write_text(compilation.text, encoding="utf-8")
        except OSError as exc:
            raise CLIError(f"Cannot write {out}: {exc}", code='CLI_OUTPUT_ERROR') from exc
        logger.info("Wrote %d instruction(s) to %s", len(compilation.instructions), out)
    else:
        sys.stdout.write(compilation.text)
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    source, path = read_source(args)
    lexer = Lexer(source, path)
    for token, location in zip(lexer.tokenize(), lexer.locations):
        print(f"{location.line}:{location.column}\t{token.kind.name}\t{token.text}")
    return 0


def cmd_ast(args: argparse.Namespace) -> int:
    source, path = read_source(args)
    compilation = compile_unit(source, path=path, settings=_effective_settings(args))
    payload = {
        "type": "Program",
        "body": [
            {"type": type(node).__name__, **asdict(node)}
            for node in compilation.program.body
        ],
    }
    print(json.dumps(payload, indent=2))
    return 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('source', nargs='?', help="Source file ('-' or omitted reads stdin)")
    parser.add_argument('--sample', action='store_true', help='Use the built-in sample program')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tally',
        description='Translate Tally programs to pseudo-assembly',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--log-level',
        choices=sorted(LEVEL_MAP),
        help='Logging level (default: TALLY_LOG_LEVEL or warning)',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    compile_parser = subparsers.add_parser('compile', help='Translate a program')
    _add_source_arguments(compile_parser)
    compile_parser.add_argument('-o', '--output', help='Write assembly to this file instead of stdout')
    compile_parser.add_argument(
        '--positional',
        action='store_true',
        help='Read statement fields by position without checking token kinds',
    )
    compile_parser.set_defaults(func=cmd_compile)

    tokens_parser = subparsers.add_parser('tokens', help='Show the token stream')
    _add_source_arguments(tokens_parser)
    tokens_parser.set_defaults(func=cmd_tokens)

    ast_parser = subparsers.add_parser('ast', help='Show the parsed program as JSON')
    _add_source_arguments(ast_parser)
    ast_parser.add_argument(
        '--positional',
        action='store_true',
        help='Read statement fields by position without checking token kinds',
    )
    ast_parser.set_defaults(func=cmd_ast)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args, get_settings())

    try:
        return args.func(args)
    except (CLIError, TallyError) as exc:
        print(format_cli_error(exc), file=sys.stderr)
        return 1


__all__ = ["build_parser", "cmd_ast", "cmd_compile", "cmd_tokens", "main", "read_source"]
