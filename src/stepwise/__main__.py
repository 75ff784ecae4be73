"""Allow running as ``python -m stepwise``."""

from stepwise.cli import cli_main

cli_main()
