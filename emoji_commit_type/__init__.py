"""
Emoji Commit Type

The fixed set of emoji commit categories and their SemVer bump levels.
"""

__version__ = "1.0.0"

from emoji_commit_type.types import BumpLevel, CommitType, CommitTypeIterator, CommitTypeError

# Used by: cli/args.py (argparse choices for --type)
COMMIT_TYPE_NAMES = [commit_type.value for commit_type in CommitType]

__all__ = [
    "__version__",
    "BumpLevel",
    "CommitType",
    "CommitTypeIterator",
    "CommitTypeError",
    "COMMIT_TYPE_NAMES",
]
