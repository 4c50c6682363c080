"""Run the exporter with ``python -m switchexporter``."""

from __future__ import annotations

import sys

from switchexporter.cli import main as cli_main


def main() -> None:
    """Console script entry point."""
    cli_main(sys.argv[1:])


if __name__ == "__main__":
    main()
