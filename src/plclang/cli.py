"""Command-line interface for plclang."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plclang.errors import LexError, ParseError
from plclang.parser import Rule

_RULE_NAMES = [rule.value for rule in Rule]


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    rule: Rule
    tokens: bool
    debug: bool


class ConfigError(Exception):
    """Raised when plclang.toml holds a value of the wrong shape."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="plclang",
        description="Lex and parse PLC source, printing tokens or the AST",
    )
    p.add_argument("input", help="Input source file, or '-' for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--rule",
        choices=_RULE_NAMES,
        default=None,
        help="Entry rule to parse (default: source)",
    )
    p.add_argument(
        "--tokens",
        action="store_true",
        default=None,
        help="Print the token stream instead of the AST",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover plclang.toml)",
    )
    p.add_argument(
        "--debug", action="store_true", help="Dump the token stream to stderr before parsing"
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load the ``[plclang]`` table of a TOML config, or {} when there is no file."""
    path = config_path if config_path is not None else input_dir / "plclang.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.get("plclang", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [plclang] must be a table")
    return section


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = Path(".")
    if input_file is not None and input_file.parent.parts:
        input_dir = input_file.parent

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc

    rule = Rule.SOURCE
    cfg_rule = config.get("rule")
    if cfg_rule is not None:
        if cfg_rule not in _RULE_NAMES:
            raise ConfigError(f"invalid rule in config: {cfg_rule!r}")
        rule = Rule(cfg_rule)
    if args.rule is not None:
        rule = Rule(args.rule)

    tokens = False
    cfg_tokens = config.get("tokens")
    if cfg_tokens is not None:
        if not isinstance(cfg_tokens, bool):
            raise ConfigError(f"invalid tokens flag in config: {cfg_tokens!r}")
        tokens = cfg_tokens
    if args.tokens is not None:
        tokens = args.tokens

    return CliOptions(
        input_file=input_file,
        output_file=Path(args.output) if args.output else None,
        rule=rule,
        tokens=tokens,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def process_source(source: str, options: CliOptions) -> str:
    """Lex (and unless --tokens, parse) source; return the text to print."""
    from plclang.debug import dump_ast, dump_tokens
    from plclang.lexer import tokenize
    from plclang.parser import parse_tokens

    out = io.StringIO()
    tokens = tokenize(source)
    if options.debug:
        dump_tokens(tokens)
    if options.tokens:
        dump_tokens(tokens, file=out)
        return out.getvalue()

    ast = parse_tokens(tokens, options.rule, source)
    dump_ast(ast, file=out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options)
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc.strerror}", file=sys.stderr)
        return 2

    filename = str(options.input_file) if options.input_file else "<stdin>"
    try:
        text = process_source(source, options)
    except (LexError, ParseError) as exc:
        print(exc.format(filename), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
