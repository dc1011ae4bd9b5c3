#!/usr/bin/env python3
"""Main entry point for the shellwords command-line tool."""

import sys

from shellwords.commands import main


def run() -> None:
    """Run the CLI, turning uncaught errors into exit codes."""
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
