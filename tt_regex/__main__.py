"""Allow running as ``python -m tt_regex``."""

from tt_regex.cli import main


main()
