"""
Top-level package for commit_format.

The public API lives in :mod:`commit_format.format` and is re-exported
here for convenience.
"""

__all__ = [
    "__version__",
    "__base_version__",
    "COMMIT_TYPE_ALIASES",
    "CommitMessageError",
    "CommitMessageOption",
    "CommitType",
    "commit_message",
    "find_commit_type",
    "parse_commit_message",
]

# Major version - controlled manually
__base_version__ = "0"
__version__ = f"{__base_version__}.1.0"

from commit_format.format import (  # noqa: E402
    COMMIT_TYPE_ALIASES,
    CommitMessageError,
    CommitMessageOption,
    CommitType,
    commit_message,
    find_commit_type,
    parse_commit_message,
)
