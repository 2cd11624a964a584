"""
Commit type classification for Conventional Commit messages.

Every commit type has one canonical keyword used when rendering a header
and a set of aliases accepted when reading one. Aliases are matched
case-insensitively against the whole token; there is no prefix or fuzzy
matching. Unrecognized tokens map to :attr:`CommitType.NONE`.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class CommitType(Enum):
    """Conventional Commit categories, valued by their canonical keyword."""

    NONE = "none"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    DOC = "doc"
    FEATURE = "feat"
    FIX = "fix"
    PERF = "perf"
    REFACTOR = "refactor"
    STYLE = "style"
    TEST = "test"

    @property
    def keyword(self) -> str:
        """Keyword written in a rendered commit header."""
        return self.value

    @property
    def aliases(self) -> FrozenSet[str]:
        """Lower-case tokens that classify as this type."""
        return COMMIT_TYPE_ALIASES[self]


COMMIT_TYPE_ALIASES: Mapping[CommitType, FrozenSet[str]] = MappingProxyType(
    {
        CommitType.NONE: frozenset(),
        CommitType.BUILD: frozenset({"b", "build", "builds"}),
        CommitType.CI: frozenset({"ci"}),
        CommitType.CHORE: frozenset({"ch", "chore", "chores"}),
        CommitType.DOC: frozenset({"d", "doc", "docs"}),
        CommitType.FEATURE: frozenset({"fe", "feat", "feats", "feature", "features"}),
        CommitType.FIX: frozenset({"fi", "fix", "fixes"}),
        CommitType.PERF: frozenset({"p", "perf", "perfs", "performance", "performances"}),
        CommitType.REFACTOR: frozenset({"r", "refactor", "refactors"}),
        CommitType.STYLE: frozenset({"s", "style", "styles"}),
        CommitType.TEST: frozenset({"t", "test", "tests"}),
    }
)

# Reverse lookup, alias -> type. Alias sets are disjoint.
_ALIAS_LOOKUP: Dict[str, CommitType] = {
    alias: ctype for ctype, aliases in COMMIT_TYPE_ALIASES.items() for alias in aliases
}


def find_commit_type(token: str) -> CommitType:
    """Classify ``token`` into a :class:`CommitType`.

    Parameters
    ----------
    token : str
        A candidate type word such as ``feat``, ``Fixes`` or ``DOCS``.

    Returns
    -------
    CommitType
        The matching commit type, or :attr:`CommitType.NONE` when the token
        is not a known alias.
    """
    ctype = _ALIAS_LOOKUP.get(token.lower(), CommitType.NONE)
    if ctype is CommitType.NONE:
        logger.debug("Unrecognized commit type token: %r", token)
    return ctype
