"""CLI Main Entry Point"""

import os
import sys
from dataclasses import replace

from emoji_commit_type import CommitType, CommitTypeError
from emoji_commit_type.config import Config, load_config, VALID_FORMATS
from emoji_commit_type.output import print_error, print_warning

from emoji_commit_type.cli.args import parse_args
from emoji_commit_type.cli.commands import (
    display_config,
    json_commit_types,
    list_commit_types,
    run_install_completion,
    run_save_config,
    show_commit_type,
    table_commit_types,
)


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def _get_format(args, config: Config) -> str:
    """Resolve output format from args, env, or config.

    Precedence: CLI args > environment variables > config file
    """
    if args.format:
        return args.format
    env_format = os.environ.get('ECT_FORMAT')
    if env_format:
        if env_format in VALID_FORMATS:
            return env_format
        print_warning(f"Ignoring ECT_FORMAT={env_format}, expected one of: {', '.join(sorted(VALID_FORMATS))}")
    return config.format


def _resolve_commit_type(args) -> CommitType | None:
    """Look up the type requested by --type or --emoji, if any."""
    if args.type:
        return CommitType.from_name(args.type)
    if args.emoji:
        return CommitType.from_emoji(args.emoji)
    return None


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    # Copy so CLI overrides never leak into the cached config
    config = replace(load_config())
    fmt = _get_format(args, config)

    # Apply CLI overrides to config
    if args.bump:
        config.show_bump = True
    if args.no_header:
        config.show_header = False

    if args.save_config:
        config.format = fmt
        return run_save_config(config)

    try:
        commit_type = _resolve_commit_type(args)
    except CommitTypeError as e:
        print_error(str(e))
        return 1

    if commit_type is not None:
        return show_commit_type(commit_type, fmt)
    if fmt == "json":
        return json_commit_types()
    if fmt == "table":
        return table_commit_types()
    return list_commit_types(config)


if __name__ == "__main__":
    sys.exit(main())
