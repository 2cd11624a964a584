"""
Conventional Commit formatting.

See :mod:`commit_format.format.commit_type` for type classification and
:mod:`commit_format.format.commit_message` for rendering and parsing.
"""

from .commit_message import (  # noqa: F401
    CommitMessageError,
    CommitMessageOption,
    commit_message,
    parse_commit_message,
)
from .commit_type import COMMIT_TYPE_ALIASES, CommitType, find_commit_type  # noqa: F401
