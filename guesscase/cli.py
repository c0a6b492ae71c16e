"""CLI with subcommands for guessing the case of music titles."""

import argparse
import logging
import sys

from guesscase.config import DEFAULT_MODE, MUSICBRAINZ_RELEASE_URL, Options
from guesscase.errors import InvalidModeError
from guesscase.modes import MODES, get_mode, render_description
from guesscase.normalize import guess_case


def _options(args):
    return Options(uppercase_roman_numerals=not args.no_roman)


def _print_faults(faults):
    for fault in faults:
        print(f"    ! {type(fault).__name__}: {fault}", file=sys.stderr)


def cmd_title(args):
    """Guess case for titles given as arguments, or one per line on stdin."""
    titles = args.titles
    if not titles:
        titles = [line.rstrip("\n") for line in sys.stdin]
    options = _options(args)
    for title in titles:
        result = guess_case(title, args.mode, options)
        print(result.title)
        if args.verbose:
            _print_faults(result.faults)


def cmd_release(args):
    """Show guess case results for all titles of a MusicBrainz release."""
    import musicbrainzngs

    from guesscase.musicbrainz import preview_release

    try:
        rows = preview_release(args.mbid, args.mode, _options(args))
    except musicbrainzngs.WebServiceError as e:
        print(f"Error fetching release {args.mbid}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"  {MUSICBRAINZ_RELEASE_URL.format(mbid=args.mbid)}  [{get_mode(args.mode).id}]")
    changed = 0
    for row in rows:
        if row["disc"] is None:
            label = "release"
        else:
            label = f"{row['disc']}.{row['position']}"
        marker = " " if row["original"] == row["guessed"] else "*"
        if marker == "*":
            changed += 1
        print(f"  {marker} {label:>8s}  {row['original']}")
        if marker == "*":
            print(f"    {'':>8s}  -> {row['guessed']}")
        if args.verbose:
            _print_faults(row["faults"])
    print(f"  {changed} of {len(rows)} titles would change.")


def cmd_modes(args):
    """List the available modes."""
    for mode_id, mode in MODES.items():
        print(f"  {mode_id}")
        print(f"    {render_description(mode)}")


def _mode_arg(value):
    try:
        return get_mode(value).id
    except InvalidModeError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="guesscase",
        description="Guess the capitalization of music release and track titles",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-m", "--mode", type=_mode_arg, default=DEFAULT_MODE,
                        help=f"Guess case mode: {', '.join(MODES)} "
                             f"(default: {DEFAULT_MODE})")
    common.add_argument("--no-roman", action="store_true",
                        help="Do not uppercase roman numerals (I, II, ... X)")
    common.add_argument("-v", "--verbose", action="store_true",
                        help="Report rule and bracket faults")

    # title
    p_title = subparsers.add_parser("title", parents=[common],
                                    help="Guess case for titles")
    p_title.add_argument("titles", nargs="*",
                         help="Titles to normalize (default: read stdin)")
    p_title.set_defaults(func=cmd_title)

    # release
    p_release = subparsers.add_parser("release", parents=[common],
                                      help="Preview guess case on a MusicBrainz release")
    p_release.add_argument("mbid", help="MusicBrainz release id")
    p_release.set_defaults(func=cmd_release)

    # modes
    p_modes = subparsers.add_parser("modes", help="List guess case modes")
    p_modes.set_defaults(func=cmd_modes)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    args.func(args)
