"""Command line entry point: ``conllukit`` / ``python -m conllukit``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from . import __version__
from .config import ConllukitConfig
from .io_conllu import load_sentences, resolve_output_format, save_sentences
from .sentence import Sentence
from .storage import MISSING_TARGET_CHOICES, OUTPUT_FORMAT_CHOICES

TASK_CHOICES = ("convert", "expand", "collapse", "info", "config")


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "1", "yes", "on"}:
        return True
    if lowered in {"false", "0", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"Expected true/false, got '{value}'")


def _configure_logging(args: argparse.Namespace) -> None:
    if getattr(args, "debug", False):
        level = logging.DEBUG
    elif getattr(args, "verbose", False):
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[conllukit] %(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conllukit",
        description="Read, edit and write CoNLL-U sentences (multiword token expand/collapse).",
    )
    parser.add_argument("--version", "-V", action="version", version=f"conllukit {__version__}")
    subparsers = parser.add_subparsers(dest="task", required=False)

    # Common arguments that all subcommands inherit
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    parent_parser.add_argument("--verbose", action="store_true", help="Print high-level progress messages")

    input_parser = argparse.ArgumentParser(add_help=False)
    input_parser.add_argument(
        "--input",
        default=None,
        help="CoNLL-U input file. If not provided and STDIN has data, reads from STDIN.",
    )
    input_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unrecognized lines and collect multiword children anywhere in the sentence",
    )

    output_parser = argparse.ArgumentParser(add_help=False)
    output_parser.add_argument("--output", default=None, help="Output file (default: STDOUT)")
    output_parser.add_argument(
        "--output-format",
        choices=OUTPUT_FORMAT_CHOICES,
        default=None,
        help="Output format (default: from config, else conllu)",
    )

    # convert -----------------------------------------------------------------
    subparsers.add_parser(
        "convert",
        help="Parse and re-serialize a CoNLL-U file (normalizes placeholders)",
        parents=[parent_parser, input_parser, output_parser],
    )

    # expand ------------------------------------------------------------------
    expand_parser = subparsers.add_parser(
        "expand",
        help="Split a token into a two-part multiword token",
        parents=[parent_parser, input_parser, output_parser],
    )
    expand_parser.add_argument(
        "--sentence", required=True, help="1-based sentence number or sent_id"
    )
    expand_parser.add_argument("--token-id", required=True, help="Id of the token to split")
    expand_parser.add_argument(
        "--index", type=int, required=True, help="Character offset at which to split the form"
    )

    # collapse ----------------------------------------------------------------
    collapse_parser = subparsers.add_parser(
        "collapse",
        help="Merge a multiword token back into a single token",
        parents=[parent_parser, input_parser, output_parser],
    )
    collapse_parser.add_argument(
        "--sentence", required=True, help="1-based sentence number or sent_id"
    )
    collapse_parser.add_argument(
        "--token-id", required=True, help="Range id (e.g. 2-3) or first child id of the multiword token"
    )

    # info --------------------------------------------------------------------
    info_parser = subparsers.add_parser(
        "info",
        help="Summarize the sentences of a CoNLL-U file",
        parents=[parent_parser, input_parser],
    )
    info_parser.add_argument("--tokens", action="store_true", help="Also print each sentence's token table")

    # config ------------------------------------------------------------------
    config_parser = subparsers.add_parser(
        "config", help="Configure conllukit settings", parents=[parent_parser]
    )
    config_parser.add_argument(
        "--set-strict-parsing",
        type=_str_to_bool,
        metavar="true|false",
        help="Reject unrecognized lines and detached multiword children (true or false)",
    )
    config_parser.add_argument(
        "--set-missing-target",
        choices=MISSING_TARGET_CHOICES,
        help="What expand/collapse do when the target id does not exist",
    )
    config_parser.add_argument(
        "--set-default-output-format",
        choices=OUTPUT_FORMAT_CHOICES,
        metavar="FORMAT",
        help="Set the default output format (conllu or json)",
    )
    config_parser.add_argument("--show", action="store_true", help="Show current configuration")
    return parser


def _read_sentences(args: argparse.Namespace, config: ConllukitConfig) -> List[Sentence]:
    strict = config.strict_parsing and not args.lenient
    stdin_content: Optional[str] = None
    if not args.input:
        if sys.stdin.isatty():
            raise SystemExit("[conllukit] No input: use --input or pipe CoNLL-U data on STDIN.")
        stdin_content = sys.stdin.read()
    return load_sentences(args.input, stdin_content=stdin_content, strict=strict)


def _write_sentences(sentences: List[Sentence], args: argparse.Namespace, config: ConllukitConfig) -> int:
    output_format = args.output_format or config.default_output_format
    if resolve_output_format(output_format) is None:
        print(f"[conllukit] Unknown output format '{output_format}'", file=sys.stderr)
        return 1
    save_sentences(sentences, output_format, args.output)
    return 0


def _select_sentence(sentences: List[Sentence], selector: str) -> Optional[Sentence]:
    """Pick a sentence by 1-based number, falling back to a sent_id match."""
    if selector.isdigit():
        number = int(selector)
        if 1 <= number <= len(sentences):
            return sentences[number - 1]
    for sentence in sentences:
        if sentence.sent_id == selector:
            return sentence
    return None


def run_convert(args: argparse.Namespace, config: ConllukitConfig) -> int:
    sentences = _read_sentences(args, config)
    return _write_sentences(sentences, args, config)


def run_expand(args: argparse.Namespace, config: ConllukitConfig) -> int:
    sentences = _read_sentences(args, config)
    sentence = _select_sentence(sentences, args.sentence)
    if sentence is None:
        print(f"[conllukit] No sentence '{args.sentence}'", file=sys.stderr)
        return 1
    group = sentence.expand(args.token_id, args.index, missing_ok=config.missing_ok)
    if group is None:
        print(
            f"[conllukit] No standalone token '{args.token_id}' in sentence '{args.sentence}'; left unchanged",
            file=sys.stderr,
        )
    return _write_sentences(sentences, args, config)


def run_collapse(args: argparse.Namespace, config: ConllukitConfig) -> int:
    sentences = _read_sentences(args, config)
    sentence = _select_sentence(sentences, args.sentence)
    if sentence is None:
        print(f"[conllukit] No sentence '{args.sentence}'", file=sys.stderr)
        return 1
    token = sentence.collapse(args.token_id, missing_ok=config.missing_ok)
    if token is None:
        print(
            f"[conllukit] No multiword token '{args.token_id}' in sentence '{args.sentence}'; left unchanged",
            file=sys.stderr,
        )
    return _write_sentences(sentences, args, config)


def run_info(args: argparse.Namespace, config: ConllukitConfig) -> int:
    from .info import run_info_cli

    sentences = _read_sentences(args, config)
    return run_info_cli(args, sentences)


def run_config(args: argparse.Namespace) -> int:
    """Run config command to manage conllukit configuration."""
    from .storage import (
        get_config_file,
        set_default_output_format,
        set_missing_target,
        set_strict_parsing,
    )

    changed = False
    if args.set_strict_parsing is not None:
        set_strict_parsing(args.set_strict_parsing)
        print(f"[conllukit] Strict parsing set to: {args.set_strict_parsing}")
        changed = True
    if args.set_missing_target:
        set_missing_target(args.set_missing_target)
        print(f"[conllukit] Missing expand/collapse target set to: {args.set_missing_target}")
        changed = True
    if args.set_default_output_format:
        set_default_output_format(args.set_default_output_format)
        print(f"[conllukit] Default output format set to: {args.set_default_output_format}")
        changed = True
    if changed:
        print(f"[conllukit] Configuration saved to: {get_config_file()}")

    if args.show or not changed:
        print(f"Config file: {get_config_file(create_dir=False)}")
        print(json.dumps(asdict(ConllukitConfig.load()), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    else:
        argv = list(argv)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.task:
        parser.error("No task specified. Use one of: " + ", ".join(TASK_CHOICES))

    _configure_logging(args)

    if args.task == "config":
        return run_config(args)

    config = ConllukitConfig.load()
    try:
        if args.task == "convert":
            return run_convert(args, config)
        if args.task == "expand":
            return run_expand(args, config)
        if args.task == "collapse":
            return run_collapse(args, config)
        if args.task == "info":
            return run_info(args, config)
    except ValueError as exc:
        # ConlluError and invalid split offsets
        print(f"[conllukit] {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unknown task '{args.task}'. Supported tasks: {', '.join(TASK_CHOICES)}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
