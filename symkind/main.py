import argparse
import random
import sys
import textwrap
from typing import List, Optional, TextIO

from symkind import env_info
from symkind.concrete import show_cw
from symkind.kind import Kind, KBounded, kind_has_sign, parse_kind, smt_type
from symkind.options import DEFAULT_OPTIONS, ValueOptions, option_set_from_dict
from symkind.randomcw import random_cw
from symkind.util import SymKindError, debug, in_debug, set_debug


def command_line_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(
        add_help=False, formatter_class=argparse.RawTextHelpFormatter
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Output additional debugging information on stderr",
    )
    parser = argparse.ArgumentParser(
        prog="symkind", description="Inspect kinds and sample concrete values"
    )
    subparsers = parser.add_subparsers(help="sub-command help", dest="action")
    describe_parser = subparsers.add_parser(
        "describe",
        help="Show the SMT-LIB sort, sign and width of kinds",
        parents=[common],
        formatter_class=argparse.RawTextHelpFormatter,
    )
    describe_parser.add_argument(
        "kind",
        metavar="KIND",
        type=str,
        nargs="+",
        help='A kind by its display name, e.g. "SWord8" or "[SInteger]"',
    )
    random_parser = subparsers.add_parser(
        "random",
        help="Print random values of a kind",
        parents=[common],
        formatter_class=argparse.RawTextHelpFormatter,
        description=textwrap.dedent(
            """\
        The random command prints random concrete values, one per line.

        It exits with one of the following codes:
            0 : Values were printed
            2 : The kind is unknown or has no random values
        """
        ),
    )
    random_parser.add_argument(
        "kind",
        metavar="KIND",
        type=str,
        help='A kind by its display name, e.g. "SInt16" or "SString"',
    )
    random_parser.add_argument(
        "--count",
        type=int,
        default=1,
        metavar="N",
        help="Number of values to print",
    )
    random_parser.add_argument(
        "--seed",
        type=int,
        metavar="SEED",
        help="Seed for the random generator (for reproducible output)",
    )
    random_parser.add_argument(
        "--max_sequence_length",
        type=int,
        metavar="N",
        help="Longest string or list to generate (default: 100)",
    )
    random_parser.add_argument(
        "--max_char_code",
        type=int,
        metavar="N",
        help="Highest character code to generate (default: 255)",
    )
    return parser


def describe_kind(kind: Kind) -> str:
    width = str(kind.size) if isinstance(kind, KBounded) else "-"
    sign = "signed" if kind_has_sign(kind) else "unsigned"
    return f"{kind}\t{smt_type(kind)}\t{sign}\t{width}"


def describe(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    try:
        kinds = [parse_kind(text) for text in args.kind]
    except SymKindError as exc:
        print(exc, file=stderr)
        return 2
    for kind in kinds:
        print(describe_kind(kind), file=stdout)
    return 0


def sample(
    args: argparse.Namespace,
    options: ValueOptions,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    rng = random.Random(args.seed)
    try:
        kind = parse_kind(args.kind)
        values = [random_cw(kind, rng, options) for _ in range(args.count)]
    except SymKindError as exc:
        print(exc, file=stderr)
        return 2
    for value in values:
        print(show_cw(value, False), file=stdout)
    return 0


def run(cmd_args: List[str]) -> int:
    parser = command_line_parser()
    args = parser.parse_args(cmd_args)
    if not args.action:
        parser.print_help(sys.stderr)
        return 2
    set_debug(args.verbose)
    if in_debug():
        debug(env_info())
    if args.action == "describe":
        return describe(args, sys.stdout, sys.stderr)
    elif args.action == "random":
        options = DEFAULT_OPTIONS.overlay(option_set_from_dict(args.__dict__))
        return sample(args, options, sys.stdout, sys.stderr)
    else:
        print(f'Unknown action: "{args.action}"', file=sys.stderr)
        return 2


def main(cmd_args: Optional[List[str]] = None) -> None:
    if cmd_args is None:
        cmd_args = sys.argv[1:]
    sys.exit(run(cmd_args))


if __name__ == "__main__":
    main()
