"""Command-line interface for the LadderPy project."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Find all shortest word ladders between two words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every shortest ladder from 'cold' to 'warm' using the english-words dictionary
  %(prog)s cold warm

  # Using only the 5000 most frequent English words, written as YAML
  %(prog)s hit cog --source wordfreq --top-n 5000 --format yaml -o ladders.yml

  # Custom dictionary file, many pairs solved in parallel
  %(prog)s --pairs pairs.txt --source file --include words.txt -j 4 -v

  # Using JSON config
  %(prog)s --config config.json

Pairs files hold one pair per line:
  hit cog
  cold warm

Example config.json:
{
  "pairs": "pairs.txt",
  "source": "wordfreq",
  "top_n": 20000,
  "exclude": "exclude.txt",
  "format": "json",
  "output": "ladders.json",
  "max_ladders": 10,
  "verbose": true,
  "jobs": 4
}
        """,
    )

    parser.add_argument("start", nargs="?", default=None, help="First word of the ladder")
    parser.add_argument("end", nargs="?", default=None, help="Last word of the ladder")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("--pairs", type=str, help="File with one 'start end' pair per line")

    # Dictionary
    parser.add_argument(
        "--source",
        type=str,
        choices=["english-words", "wordfreq", "file"],
        default="english-words",
        help="Base dictionary (file: use only --include words)",
    )
    parser.add_argument("--top-n", type=int, help="Use the top N most common English words")
    parser.add_argument("--include", type=str, help="File with additional dictionary words")
    parser.add_argument("--exclude", type=str, help="File with exclusion patterns (* wildcards)")

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "yaml", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--max-ladders", type=int, help="Maximum ladders written per pair")

    # Flags
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject words of mismatched length or with characters outside a-z",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers (default: {cpu_count()})",
    )

    return parser
