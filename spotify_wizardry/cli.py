"""
Command-Line Interface for Spotify Wizardry
===========================================

Usage:
    python -m spotify_wizardry.cli sort <genre> [<genre> ...] [options]
    python -m spotify_wizardry.cli houses [--with-images]
    python -m spotify_wizardry.cli spotify [--time-range RANGE] [--wrapped]

Options:
    --file          JSON file holding an array of genre strings
    --format        Output format for `sort`: json or simple (default: json)
    --output, -o    Output file path (default: stdout)
    --verbose, -v   Debug logging on stderr
    --help, -h      Show this help message

Examples:
    python -m spotify_wizardry.cli sort edm pop "indie rock"
    python -m spotify_wizardry.cli sort --file genres.json --format simple
    SPOTIFY_ACCESS_TOKEN=... python -m spotify_wizardry.cli spotify --time-range short_term
"""

import argparse
import json
import sys
from typing import List, Optional

import spotipy

from .config import DEFAULT_TIME_RANGE, JSON_INDENT, OUTPUT_FORMATS, TIME_RANGES
from .genres import validate_genres
from .houses import HOUSE_ORDER, all_house_details
from .logging_utils import configure_logging
from .scoring import HouseSortResult, classify


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='spotify_wizardry',
        description='🧙 Spotify Wizardry - Sort your music taste into a house',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s sort edm pop rock
  %(prog)s sort --file genres.json --format simple
  %(prog)s houses
  %(prog)s spotify --time-range medium_term

Environment Variables:
  SPOTIFY_ACCESS_TOKEN   User access token for the `spotify` and `houses --with-images` commands
  LOG_LEVEL              Logging level (default: WARNING)
        """
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output file path (default: print to stdout)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    sort_parser = subparsers.add_parser('sort', help='Sort a list of genres into a house')
    sort_parser.add_argument(
        'genres',
        nargs='*',
        help='Genre strings, e.g. "indie rock"'
    )
    sort_parser.add_argument(
        '--file',
        type=str,
        default=None,
        help='JSON file containing an array of genre strings'
    )
    sort_parser.add_argument(
        '--format',
        type=str,
        choices=list(OUTPUT_FORMATS),
        default='json',
        help='Output format (default: json)'
    )

    houses_parser = subparsers.add_parser('houses', help='Show the house catalog')
    houses_parser.add_argument(
        '--with-images',
        action='store_true',
        help='Resolve famous musicians on Spotify (needs a token)'
    )
    houses_parser.add_argument('--token', type=str, default=None, help='Spotify access token')

    spotify_parser = subparsers.add_parser('spotify', help="Sort the token owner's top artists")
    spotify_parser.add_argument(
        '--time-range',
        type=str,
        choices=list(TIME_RANGES),
        default=DEFAULT_TIME_RANGE,
        help=f'Listening period (default: {DEFAULT_TIME_RANGE})'
    )
    spotify_parser.add_argument(
        '--wrapped',
        action='store_true',
        help='Print top tracks and artists instead of the house'
    )
    spotify_parser.add_argument('--token', type=str, default=None, help='Spotify access token')

    return parser


def format_result(result: HouseSortResult, fmt: str) -> str:
    """Format a sort result based on requested format."""
    if fmt == 'simple':
        lines = [
            f"🏰 House: {result.house.value} ({result.match_score}% match)",
            f"   {result.description}",
            f"   Traits: {', '.join(result.traits)}",
            f"   Famous musicians: {', '.join(result.famous_musicians)}",
            "",
            "Distribution:",
            "-" * 50,
        ]
        for house in HOUSE_ORDER:
            lines.append(
                f"  {house.value:<10} {result.normalized_percentages[house]:>4}%"
                f"   raw {result.raw_scores[house]:>3}"
                f"   compatibility {result.compatibility[house]:>3}"
            )
        return '\n'.join(lines)

    return result.to_json(indent=JSON_INDENT)


def load_genres(args: argparse.Namespace) -> List[str]:
    """Genres from the command line followed by those in --file."""
    genres = list(args.genres)
    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            genres.extend(validate_genres(json.load(f)))
    return genres


def run_command(args: argparse.Namespace) -> str:
    """Execute the selected subcommand and return its output text."""
    if args.command == 'sort':
        result = classify(load_genres(args))
        return format_result(result, args.format)

    if args.command == 'houses':
        if args.with_images:
            from .spotify_client import SpotifyClient
            details = SpotifyClient(access_token=args.token).house_details_with_images()
        else:
            details = all_house_details()
        return json.dumps({"allHouseDetails": details}, indent=JSON_INDENT)

    # spotify
    from .spotify_client import SpotifyClient
    client = SpotifyClient(access_token=args.token)
    if args.wrapped:
        payload = client.get_wrapped(time_range=args.time_range)
    else:
        payload = client.sort_house(time_range=args.time_range)
    return json.dumps(payload, indent=JSON_INDENT)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging('DEBUG' if args.verbose else None)

    try:
        output = run_command(args)
    except (OSError, ValueError, TypeError, spotipy.SpotifyException) as e:
        print(f"❌ Error: {str(e)}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"✅ Output saved to: {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
