"""CLI Argument Parsing"""

import argparse
import argcomplete

from emoji_commit_type import COMMIT_TYPE_NAMES, __version__
from emoji_commit_type.config import VALID_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ect',
        description='List the emoji commit types and their SemVer bump levels',
        epilog='Example: ect --bump'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Display options
    parser.add_argument('-f', '--format', type=str, choices=sorted(VALID_FORMATS), help='Output format (default: list)')
    parser.add_argument('-b', '--bump', action='store_true', help='Show the SemVer bump level of each type')
    parser.add_argument('--no-header', action='store_true', help='Omit the header line in list output')

    # Lookup options
    lookup = parser.add_mutually_exclusive_group()
    lookup.add_argument('-t', '--type', type=str.lower, choices=COMMIT_TYPE_NAMES, help='Show a single commit type')
    lookup.add_argument('-e', '--emoji', type=str, metavar='EMOJI', help='Show the commit type for an emoji')

    # Config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--save-config', action='store_true', help='Save the current display options to ~/.ectrc')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
