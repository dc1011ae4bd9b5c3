"""Command-line interface handler for shellwords."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console

from . import batch
from . import config
from . import quoting
from . import splitter
from .errors import CheckFailed, ConfigError, ParseError, ShellwordsException

console = Console()
error_console = Console(stderr=True)

VERSION = "1.0"


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: sw [-h | --help] <command> [<args>]

Commands:
  split                    Split a line into words the way the shell does
      --json               Print the words as a JSON array
      -0, --null           Terminate each word with NUL instead of newline
      <line>               The line to split (default: each line of stdin)

  escape                   Escape each word for use as shell input
      <word>...            The words to escape, printed one per line

  join                     Escape the words and join them into one line
      <word>...            The words to join

  check                    Split every line of the files and report errors
      --no-comments        Also split lines starting with #
      <file>...            The files to check

  help                     Show this help message
  version                  Show program version

Configuration is read from shellwords.toml in the user config directory,
or from the file named by $SHELLWORDS_CONFIG.
""")


def print_version() -> None:
    """Print version information."""
    print(VERSION)


def print_words(words: list[str], output_format: str) -> None:
    """Print split words in the requested output format."""
    if output_format == "json":
        print(json.dumps(words, ensure_ascii=False))
    elif output_format == "null":
        for word in words:
            sys.stdout.write(word + "\0")
    else:
        for word in words:
            print(word)


def cmd_split(args: argparse.Namespace, cfg: config.Config) -> None:
    """Execute the split command."""
    output_format = cfg.split_format
    if args.json:
        output_format = "json"
    elif args.null:
        output_format = "null"

    if args.line is not None:
        lines = [args.line]
    else:
        # Only newlines end a line; other control characters belong to it
        lines = sys.stdin.read().split("\n")
        if lines and lines[-1] == "":
            lines.pop()

    for line in lines:
        line = line.rstrip("\r")
        try:
            words = splitter.split(line)
        except ParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print_words(words, output_format)


def cmd_escape(args: argparse.Namespace, cfg: config.Config) -> None:
    """Execute the escape command."""
    for word in args.words:
        print(quoting.escape(word))


def cmd_join(args: argparse.Namespace, cfg: config.Config) -> None:
    """Execute the join command."""
    print(quoting.join(args.words))


def cmd_check(args: argparse.Namespace, cfg: config.Config) -> None:
    """Execute the check command."""
    if not args.files:
        print("Please specify at least one file to check\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    skip_comments = cfg.skip_comments and not args.no_comments
    splitter_batch = batch.BatchSplitter(skip_comments=skip_comments)

    try:
        for path in args.files:
            splitter_batch.split_file(path)
        splitter_batch.check()
    except CheckFailed as e:
        error_console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)
    except ShellwordsException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    stats = splitter_batch.stats()

    console.print(f"[magenta]┃[/magenta] {len(args.files):<6} Files")
    console.print(f"[magenta]┃[/magenta] {stats.line_count:<6} Lines")
    console.print(f"[magenta]┃[/magenta] {stats.word_count:<6} Words")
    console.print("[green]✓ All lines split cleanly[/green]")


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(description="Shell word splitting", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "--json", action="store_true", help="Print words as a JSON array"
    )
    split_parser.add_argument(
        "-0", "--null", action="store_true", help="NUL-terminate each word"
    )
    split_parser.add_argument("line", nargs="?", help="Line to split")

    # Escape command
    escape_parser = subparsers.add_parser("escape", add_help=False)
    escape_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for escape"
    )
    escape_parser.add_argument("words", nargs="*", help="Words to escape")

    # Join command
    join_parser = subparsers.add_parser("join", add_help=False)
    join_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for join"
    )
    join_parser.add_argument("words", nargs="*", help="Words to join")

    # Check command
    check_parser = subparsers.add_parser("check", add_help=False)
    check_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for check"
    )
    check_parser.add_argument(
        "--no-comments",
        action="store_true",
        dest="no_comments",
        help="Split lines starting with # too",
    )
    check_parser.add_argument("files", nargs="*", help="Files to check")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(argv) < 1:
        print_usage()
        return

    args = parser.parse_args(argv)

    # Handle global help, and command-specific help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    try:
        cfg = config.load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Execute commands
    if args.command == "split":
        cmd_split(args, cfg)
    elif args.command == "escape":
        cmd_escape(args, cfg)
    elif args.command == "join":
        cmd_join(args, cfg)
    elif args.command == "check":
        cmd_check(args, cfg)
    else:
        print_usage()
