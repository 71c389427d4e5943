#!/usr/bin/env python3
"""
CLI integration tests for the tt command.
File: tests/test_cli_integration.py

Runs the argument parser and output path end to end through run(), capturing
stdout and stderr.

Usage:  python tests/test_cli_integration.py
        pytest tests/test_cli_integration.py
"""

import io
import re
import sys
from pathlib import Path
from contextlib import redirect_stdout, redirect_stderr

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.markup import escape

from tt_regex import __version__
from tt_regex.cli import run, build_parser


console = Console()


def run_cli(*argv) -> tuple[int, str, str]:
    """Run the CLI with argv and return (exit status, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        try:
            status = run(list(argv))
        except SystemExit as e:
            status = e.code
    return status, out.getvalue(), err.getvalue()


def test_prints_pattern():
    """A valid interval prints exactly the pattern on stdout."""
    console.print("[cyan]Testing pattern output...[/cyan]")

    status, out, err = run_cli("2021-07-04 12:30:00", "2021-07-04 12:30:05")

    assert status == 0
    assert out == "2021-07-04 12:30:0[0-5]\n", repr(out)
    assert err == ""
    console.print("  [green]✓ Pattern printed verbatim[/green]")


def test_output_keeps_digit_shorthand():
    status, out, _ = run_cli("2020-01-01 00:00:00", "2020-12-31 23:59:59")

    assert status == 0
    assert out.strip() == r"2020-[0-1]\d-[0-3]\d [0-2]\d:[0-5]\d:[0-5]\d"
    assert re.fullmatch(out.strip(), "2020-06-15 12:34:56")


def test_equal_endpoints_fail():
    """START must be strictly older than END."""
    console.print("[cyan]Testing equal endpoints...[/cyan]")

    status, out, err = run_cli("2021-07-04 12:30:05", "2021-07-04 12:30:05")

    assert status == 1
    assert out == ""
    assert "Error:" in err
    assert "must be older than" in err
    console.print("  [green]✓ Exit status 1 with error on stderr[/green]")


def test_reversed_endpoints_fail():
    status, out, err = run_cli("2022-01-01 00:00:00", "2021-01-01 00:00:00")

    assert status == 1
    assert out == ""
    assert "must be older than" in err


def test_malformed_timestamp_fails():
    status, out, err = run_cli("yesterday", "2021-01-01 00:00:00")

    assert status == 1
    assert out == ""
    assert "cannot parse" in err
    assert "yesterday" in err


def test_missing_argument_is_usage_error():
    """argparse exits with status 2 when END is missing."""
    status, out, err = run_cli("2021-01-01 00:00:00")

    assert status == 2
    assert out == ""
    assert "usage:" in err


def test_version_flag():
    status, out, _ = run_cli("--version")

    assert status == 0
    assert out.strip() == f"tt v{__version__}"


def test_explain_writes_table_to_stderr():
    """--explain keeps stdout clean for piping."""
    console.print("[cyan]Testing --explain...[/cyan]")

    status, out, err = run_cli("--explain", "2020-12-31 23:59:58", "2021-01-01 00:00:01")

    assert status == 0
    assert out.strip() == r"202[0-1]-[0-1][1-2]-[0-3]1 [0-2][0-3]:[0-5]\d:[0-5]\d"
    for expected in ("year", "month", "second", "tight", "broadened"):
        assert expected in err, f"'{expected}' missing from explain output"
    console.print("  [green]✓ Breakdown on stderr, pattern on stdout[/green]")


def test_parser_has_long_options_only():
    """Like every option here, --explain has no single-letter alias."""
    parser = build_parser()
    option_strings = [s for action in parser._actions for s in action.option_strings]

    assert '--explain' in option_strings
    assert '--version' in option_strings
    assert all(s.startswith('--') for s in option_strings if s not in ('-h',))


def run_all_tests() -> bool:
    """Run all CLI integration tests."""
    console.print("[bold blue]CLI Integration Tests[/bold blue]\n")

    tests = [
        test_prints_pattern,
        test_output_keeps_digit_shorthand,
        test_equal_endpoints_fail,
        test_reversed_endpoints_fail,
        test_malformed_timestamp_fails,
        test_missing_argument_is_usage_error,
        test_version_flag,
        test_explain_writes_table_to_stderr,
        test_parser_has_long_options_only,
    ]

    passed = 0
    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            console.print(f"  [red]✗ {test.__name__}: {e}[/red]")
        except Exception as e:
            console.print(f"  [red]✗ {test.__name__}: Unexpected exception: {escape(repr(e))}[/red]")

    console.print(f"\n[bold]Results: {passed}/{len(tests)} tests passed[/bold]")
    return passed == len(tests)


def main() -> int:
    """Main entry point."""
    return 0 if run_all_tests() else 1


if __name__ == "__main__":
    sys.exit(main())


# End of file #
