"""CLI Commands"""

import json
import os
import sys

from emoji_commit_type import CommitType
from emoji_commit_type.config import Config, load_config, save_config, get_config_path
from emoji_commit_type.output import bold, dim, info, print_success, emoji_for, colorize_bump_level

HEADER = "The emoji commit types are:"


def list_commit_types(config: Config) -> int:
    """Print every commit type, one per line, in canonical order."""
    if config.show_header:
        print(HEADER)

    for commit_type in CommitType.iter_variants():
        line = f"{emoji_for(commit_type)}  - {commit_type.description}"
        if config.show_bump:
            line += f" (SemVer: {colorize_bump_level(commit_type.bump_level)})"
        print(line)
    return 0


def table_commit_types() -> int:
    """Print commit types as aligned columns."""
    name_width = max(len(t.value) for t in CommitType)
    desc_width = max(len(t.description) for t in CommitType)

    print(bold(f"    {'TYPE'.ljust(name_width)}  {'DESCRIPTION'.ljust(desc_width)}  BUMP"))
    for commit_type in CommitType.iter_variants():
        # Pad before coloring so ANSI codes don't skew the columns
        name = info(commit_type.value.ljust(name_width))
        print(f"{emoji_for(commit_type)}  {name}  {commit_type.description.ljust(desc_width)}  "
              f"{colorize_bump_level(commit_type.bump_level)}")
    return 0


def commit_type_to_dict(commit_type: CommitType) -> dict:
    return {
        "name": commit_type.value,
        "emoji": commit_type.emoji,
        "description": commit_type.description,
        "bump_level": str(commit_type.bump_level),
        "position": commit_type.position,
    }


def json_commit_types() -> int:
    data = [commit_type_to_dict(t) for t in CommitType.iter_variants()]
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def show_commit_type(commit_type: CommitType, fmt: str = "list") -> int:
    """Show a single commit type with its neighbours in canonical order."""
    if fmt == "json":
        print(json.dumps(commit_type_to_dict(commit_type), indent=2, ensure_ascii=False))
        return 0

    prev_type = commit_type.prev_variant()
    next_type = commit_type.next_variant()

    print(f"\n{emoji_for(commit_type)}  {bold(commit_type.description)}\n")
    print(f"  {dim('name:')}        {info(commit_type.value)}")
    print(f"  {dim('bump level:')}  {colorize_bump_level(commit_type.bump_level)}")
    print(f"  {dim('position:')}    {commit_type.position + 1} of {len(CommitType)}")
    print(f"  {dim('previous:')}    {prev_type.value if prev_type else dim('(first)')}")
    print(f"  {dim('next:')}        {next_type.value if next_type else dim('(last)')}")
    print()
    return 0


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .ectrc found)")

    env_format = os.environ.get('ECT_FORMAT')
    if env_format:
        print(f"  {dim('Environment overrides:')}")
        print(f"    ECT_FORMAT={env_format}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    format:      {info(config.format)}")
    print(f"    show_bump:   {info(str(config.show_bump).lower())}")
    print(f"    show_header: {info(str(config.show_header).lower())}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .ectrc (in current directory)")
    print(f"    Global: ~/.ectrc\n")

    return 0


def run_save_config(config: Config) -> int:
    """Persist display options as the global default."""
    path = save_config(config, global_config=True)
    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete ect)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell ect | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish ect | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags and type names.')}")
    return 0
