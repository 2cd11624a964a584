"""
Rendering and parsing of Conventional Commit messages.

A commit message has the shape::

    <type>[(<scope>)][!]: <description>

    <body>

    <footer 1>
    <footer 2>

The body and footer sections are optional. :func:`commit_message` turns a
:class:`CommitMessageOption` into this text and :func:`parse_commit_message`
performs the inverse, raising :class:`CommitMessageError` when the header
line is not a valid Conventional Commit header.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from commit_format.format.commit_type import CommitType, find_commit_type


logger = logging.getLogger(__name__)
# Attach a null handler so that library users without logging configured
# see nothing. Applications may attach their own handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


HEADER_PATTERN = re.compile(
    r"^(?P<type>[^\s():!]+)"
    r"(?:\((?P<scope>[^()]+)\))?"
    r"(?P<breaking>!)?"
    r": (?P<description>\S.*?)\s*$"
)


class CommitMessageError(Exception):
    """Raised when a commit message header cannot be parsed."""

    pass


@dataclass
class CommitMessageOption:
    """Structured description of a single commit message.

    Attributes
    ----------
    ctype : CommitType
        Commit category. :attr:`CommitType.NONE` means unclassified.
    description : str
        One-line summary following the colon in the header.
    scope : str
        Optional parenthesised qualifier; empty when absent.
    breaking_changes : bool
        Whether the header carries the ``!`` marker.
    body : str
        Optional free-text paragraph; empty when absent.
    footers : List[str]
        Trailing lines, each kept as an opaque string.
    """

    ctype: CommitType
    description: str
    scope: str = ""
    breaking_changes: bool = False
    body: str = ""
    footers: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return commit_message(self)


def commit_message(option: CommitMessageOption) -> str:
    """Render ``option`` as canonical commit message text."""
    header = option.ctype.keyword
    if option.scope:
        header += f"({option.scope})"
    if option.breaking_changes:
        header += "!"
    header += f": {option.description}"

    sections = [header]
    if option.body:
        sections.append(option.body)
    if option.footers:
        sections.append("\n".join(option.footers))
    return "\n\n".join(sections)


def _split_blocks(lines: List[str]) -> List[List[str]]:
    """Group lines into runs of consecutive non-blank lines."""
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def parse_commit_message(text: str) -> CommitMessageOption:
    """Parse commit message text into a :class:`CommitMessageOption`.

    The first line must be a Conventional Commit header with a recognized
    type. The remaining lines are split on blank lines: the first block is
    the body and every line of the following blocks is a footer.

    Parameters
    ----------
    text : str
        Raw commit message.

    Returns
    -------
    CommitMessageOption
        The parsed message.

    Raises
    ------
    CommitMessageError
        If the header is malformed or its type token is not recognized.
    """
    stripped = text.rstrip()
    if not stripped:
        raise CommitMessageError("Empty commit message")
    # Only "\n" separates lines; other Unicode line breaks stay in the text.
    lines = [line[:-1] if line.endswith("\r") else line for line in stripped.split("\n")]

    header = lines[0]
    match = HEADER_PATTERN.match(header)
    if match is None:
        logger.debug("Rejected commit header: %r", header)
        raise CommitMessageError(
            f"Invalid commit header {header!r}: expected '<type>[(<scope>)][!]: <description>'"
        )

    ctype = find_commit_type(match.group("type"))
    if ctype is CommitType.NONE:
        logger.debug("Rejected commit header with unknown type: %r", header)
        raise CommitMessageError(
            f"Invalid commit header {header!r}: unknown commit type {match.group('type')!r}"
        )

    blocks = _split_blocks(lines[1:])
    body = "\n".join(blocks[0]) if blocks else ""
    if len(blocks) > 2:
        logger.debug("Folding %d trailing blocks into footers", len(blocks) - 1)
    footers = [line for block in blocks[1:] for line in block]

    return CommitMessageOption(
        ctype=ctype,
        description=match.group("description"),
        scope=match.group("scope") or "",
        breaking_changes=match.group("breaking") is not None,
        body=body,
        footers=footers,
    )
