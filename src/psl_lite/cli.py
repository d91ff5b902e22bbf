"""psl-lite CLI entry point.

Usage: uv run psl-lite [--ruleset PATH] [-v] command INPUT...
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from psl_lite.config import ResolverConfig, build_resolver
from psl_lite.domain.errors import DomainClassificationError, RulesetLoadError
from psl_lite.resolver.resolver import DomainResolver

EXIT_CLASSIFICATION_ERROR = 1
EXIT_RULESET_ERROR = 2


def _add_input_parser(
    subparsers: argparse._SubParsersAction, name: str, help_text: str
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(name, help=help_text)
    p.add_argument(
        "inputs", nargs="+", metavar="INPUT",
        help="Email addresses or hostnames.",
    )
    return p


def _add_batch_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "batch",
        help="Print the registered domains of many inputs (stdin if none given).",
    )
    p.add_argument("inputs", nargs="*", metavar="INPUT")
    p.add_argument(
        "--all", dest="unique_only", action="store_false",
        help="Keep repeated domains (default: unique, first-seen order).",
    )
    p.add_argument(
        "--workers", type=int, default=None,
        help="Thread pool size (default: PSL_LITE_MAX_WORKERS or 1)",
    )


def _run_parts(resolver: DomainResolver, args: argparse.Namespace) -> int:
    code = 0
    for raw in args.inputs:
        try:
            print(json.dumps(resolver.resolve(raw).as_dict(), ensure_ascii=False))
        except DomainClassificationError as e:
            print(f"[psl-lite] {raw!r}: {e}", file=sys.stderr)
            code = EXIT_CLASSIFICATION_ERROR
    return code


def _run_strict(resolver: DomainResolver, args: argparse.Namespace) -> int:
    lookup = resolver.registered_domain if args.command == "domain" else resolver.public_suffix
    code = 0
    for raw in args.inputs:
        try:
            print(lookup(raw))
        except DomainClassificationError as e:
            print(f"[psl-lite] {raw!r}: {e}", file=sys.stderr)
            code = EXIT_CLASSIFICATION_ERROR
    return code


def _run_valid(resolver: DomainResolver, args: argparse.Namespace) -> int:
    for raw in args.inputs:
        print(f"{raw}\t{str(resolver.is_valid_domain(raw)).lower()}")
    return 0


def _run_batch(
    resolver: DomainResolver, args: argparse.Namespace, config: ResolverConfig
) -> int:
    inputs = args.inputs or [line.strip() for line in sys.stdin]
    workers = args.workers if args.workers is not None else config.max_workers
    for domain in resolver.resolve_many(inputs, unique_only=args.unique_only, max_workers=workers):
        print(domain)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="psl-lite",
        description="Public Suffix List domain classifier -- pure Python, zero infrastructure.",
    )
    parser.add_argument(
        "--ruleset", type=Path, default=None,
        help="PSL file to load (default: PSL_LITE_RULESET or the bundled snapshot)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log at DEBUG level to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_input_parser(subparsers, "parts", "Print the full breakdown of each input as JSON.")
    _add_input_parser(subparsers, "domain", "Print the registered domain (eTLD+1) of each input.")
    _add_input_parser(subparsers, "suffix", "Print the public suffix of each input.")
    _add_input_parser(subparsers, "valid", "Print whether each input has a valid registered domain.")
    _add_batch_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ResolverConfig.from_env()
        if args.ruleset is not None:
            config.ruleset_path = args.ruleset
        resolver = build_resolver(config)
    except (RulesetLoadError, ValueError) as e:
        print(f"[psl-lite] error: {e}", file=sys.stderr)
        sys.exit(EXIT_RULESET_ERROR)

    if args.command == "parts":
        code = _run_parts(resolver, args)
    elif args.command in ("domain", "suffix"):
        code = _run_strict(resolver, args)
    elif args.command == "valid":
        code = _run_valid(resolver, args)
    else:
        code = _run_batch(resolver, args, config)
    sys.exit(code)
