"""Command-line interface: compile two timestamps into a grep-ready regex."""

import sys
import signal
import argparse

from tt_regex.ui import print_pattern, print_error, display_field_table, err_console
from tt_regex._version import __version__
from tt_regex.constants import DEFAULT_TIMEZONE
from tt_regex.core.timestamp import parse_timestamp, check_interval_order
from tt_regex.core.pattern import compile_interval


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        err_console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C

    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = f"""
Timestamp layout:
    "YYYY-MM-DD HH:MM:SS"   every field zero-padded, interpreted in {DEFAULT_TIMEZONE}
    START must be strictly older than END.

Output:
    One regular expression on stdout. Fields that cannot roll over between
    START and END are matched exactly; the others are widened to a per-digit
    bounding box. The pattern is an approximation: it can match timestamps
    outside the interval, and when a field spans more than one rollover
    (e.g. "2019-12-15 00:00:00" to "2021-02-01 00:00:00") it can also miss
    timestamps inside it. No alternation is ever emitted. Use --explain to
    see which fields were widened.

Examples:
    %(prog)s "2021-07-04 12:30:00" "2021-07-04 12:30:05"
        2021-07-04 12:30:0[0-5]

    %(prog)s "2020-01-01 00:00:00" "2020-12-31 23:59:59"
        2020-[0-1]\\d-[0-3]\\d [0-2]\\d:[0-5]\\d:[0-5]\\d

    grep -P "$(%(prog)s "2020-05-01 00:00:00" "2020-05-01 00:00:09")" app.log
    %(prog)s --explain "2020-12-31 23:59:58" "2021-01-01 00:00:01"

Note: grep -E does not understand \\d; use grep -P or rg with the pattern.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tt",
        description="Generate a regular expression matching timestamps between START and END",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    parser.add_argument('start', metavar='START',
        help='Start of the interval, "YYYY-MM-DD HH:MM:SS" (inclusive)')
    parser.add_argument('end', metavar='END',
        help='End of the interval, "YYYY-MM-DD HH:MM:SS" (inclusive)')

    parser.add_argument('--version', action='version', version=f'%(prog)s v{__version__}',
        help='Show program version and exit')

    output = parser.add_argument_group('output options')
    output.add_argument('--explain', action='store_true',
        help='Show how each field was compiled (table on stderr)')

    return parser


def run(argv=None) -> int:
    """
    Parse arguments, compile the interval and print the pattern.

    Returns:
        Process exit status: 0 on success, 1 on invalid timestamps.
        Usage errors exit with status 2 through argparse.
    """
    args = build_parser().parse_args(argv)

    try:
        start = parse_timestamp(args.start)
        end = parse_timestamp(args.end)
        check_interval_order(start, end)
        compiled = compile_interval(start, end)
    except ValueError as e:
        print_error(str(e))
        return 1

    if args.explain:
        display_field_table(compiled)

    print_pattern(compiled.pattern)
    return 0


def main():
    """Console script entry point."""
    setup_signal_handlers()
    sys.exit(run())


if __name__ == "__main__":
    main()

# End of file #
