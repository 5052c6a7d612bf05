"""Command-line front end for the symbol hash tools."""

from __future__ import annotations

import argparse
import sys
import urllib.error
from collections.abc import Sequence

from .demangler import demangle
from .dictionary import DictionaryAttack, format_results, load_word_list
from .hashing import DEFAULT_SEED, hash_string
from .symbols import SubmissionError, fetch_symbol_list, submit_symbol
from .tools import inverse_hash_report, kmp_summary, parse_hex
from .xortrick import analyze_xor


def _cmd_hash(args: argparse.Namespace) -> int:
    seed = parse_hex(args.seed) if args.seed is not None else DEFAULT_SEED
    print(f"0x{hash_string(args.text, seed):x}")
    return 0


def _cmd_inverse(args: argparse.Namespace) -> int:
    sys.stdout.write(inverse_hash_report(args.hash, args.text))
    return 0


def _cmd_demangle(args: argparse.Namespace) -> int:
    symbols = args.symbols or sys.stdin.read().splitlines()
    for symbol in symbols:
        print(demangle(symbol))
    return 0


def _cmd_xor(args: argparse.Namespace) -> int:
    print(analyze_xor(args.hashes, args.chars))
    return 0


def _cmd_kmp(args: argparse.Namespace) -> int:
    print(kmp_summary(args.prefix1, args.suffix1))
    print(kmp_summary(args.prefix2, args.suffix2))
    return 0


def _cmd_dictionary(args: argparse.Namespace) -> int:
    try:
        words = load_word_list(args.wordlist)
    except OSError as exc:
        print(f"Error reading word list:\n{exc}", file=sys.stderr)
        return 1
    attack = DictionaryAttack(
        word_list=words,
        goal_h1=parse_hex(args.hash1),
        goal_h2=parse_hex(args.hash2),
        prefix1=args.prefix1,
        suffix1=args.suffix1,
        prefix2=args.prefix2,
        suffix2=args.suffix2,
        use_demangler=not args.custom,
    )
    text = format_results(attack.run())
    sys.stdout.write(text if text.endswith("\n") else text + "\n")
    return 0


def _cmd_symbols(args: argparse.Namespace) -> int:
    try:
        table = fetch_symbol_list(args.base_url)
    except (urllib.error.URLError, OSError) as exc:
        print(f"Error loading symbol list:\n{exc}", file=sys.stderr)
        return 1
    columns = range(table.column_count)
    print("\t".join(str(table.header(c)) for c in columns))
    for row in range(table.row_count):
        print("\t".join(str(table.cell(row, c)) for c in columns))
    return 0


def _cmd_submit(args: argparse.Namespace) -> int:
    try:
        submit_symbol(args.base_url, args.name)
    except SubmissionError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Symbol added to database!")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symhashkit", description="Tools for recovering hashed symbol names."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("hash", help="hash a string")
    p.add_argument("text")
    p.add_argument("--seed", help="starting value in hex")
    p.set_defaults(func=_cmd_hash)

    p = sub.add_parser("inverse", help="undo characters from a hash")
    p.add_argument("hash", help="hash value in hex")
    p.add_argument("text", help="characters to undo")
    p.set_defaults(func=_cmd_inverse)

    p = sub.add_parser("demangle", help="demangle symbols (from stdin if none given)")
    p.add_argument("symbols", nargs="*")
    p.set_defaults(func=_cmd_demangle)

    p = sub.add_parser("xor", help="guess class-name length digits")
    p.add_argument("hashes", help="hex values separated by _, space or comma")
    p.add_argument("chars", nargs="?", default="", help="known characters to fold in")
    p.set_defaults(func=_cmd_xor)

    p = sub.add_parser("kmp", help="summarise known parts of two symbols")
    for name in ("prefix1", "suffix1", "prefix2", "suffix2"):
        p.add_argument(f"--{name}", default="")
    p.set_defaults(func=_cmd_kmp)

    p = sub.add_parser("dictionary", help="dictionary attack on two hashes")
    p.add_argument("--wordlist", required=True)
    p.add_argument("--hash1", required=True)
    p.add_argument("--hash2", required=True)
    for name in ("prefix1", "suffix1", "prefix2", "suffix2"):
        p.add_argument(f"--{name}", default="")
    p.add_argument(
        "--custom",
        action="store_true",
        help="build symbol 2 from prefix2/suffix2 instead of demangling",
    )
    p.set_defaults(func=_cmd_dictionary)

    p = sub.add_parser("symbols", help="list known symbols")
    p.add_argument("--base-url", required=True)
    p.set_defaults(func=_cmd_symbols)

    p = sub.add_parser("submit", help="submit a cracked symbol")
    p.add_argument("name")
    p.add_argument("--base-url", required=True)
    p.set_defaults(func=_cmd_submit)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())