"""
Skeleton Line Filters

Predicates over a single skeleton line. A line matched by any of them is
dropped before the skeleton body is injected into a document, so the starter
template never contributes its own title, author, date, top-level heading or
comment-block delimiters.

Keyword matching is case-insensitive, as Org keywords are.
"""

import re
from typing import Callable, Tuple

LinePredicate = Callable[[str], bool]

TITLE_PATTERN = re.compile(r"^#\+TITLE:", re.IGNORECASE)
AUTHOR_PATTERN = re.compile(r"^#\+AUTHOR:", re.IGNORECASE)
DATE_PATTERN = re.compile(r"^#\+DATE:", re.IGNORECASE)
TOP_LEVEL_HEADING_PATTERN = re.compile(r"^\* ")
COMMENT_BEGIN_PATTERN = re.compile(r"^#\+BEGIN_COMMENT\b", re.IGNORECASE)
COMMENT_END_PATTERN = re.compile(r"^#\+END_COMMENT\b", re.IGNORECASE)


def is_title_line(line: str) -> bool:
    return TITLE_PATTERN.match(line) is not None


def is_author_line(line: str) -> bool:
    return AUTHOR_PATTERN.match(line) is not None


def is_date_line(line: str) -> bool:
    return DATE_PATTERN.match(line) is not None


def is_top_level_heading(line: str) -> bool:
    """True for "* Heading" only; deeper headings ("** Sub") are kept."""
    return TOP_LEVEL_HEADING_PATTERN.match(line) is not None


def is_comment_begin(line: str) -> bool:
    return COMMENT_BEGIN_PATTERN.match(line) is not None


def is_comment_end(line: str) -> bool:
    return COMMENT_END_PATTERN.match(line) is not None


EXCLUDED_LINE_PREDICATES: Tuple[LinePredicate, ...] = (
    is_title_line,
    is_author_line,
    is_date_line,
    is_top_level_heading,
    is_comment_begin,
    is_comment_end,
)


def is_excluded(line: str, predicates: Tuple[LinePredicate, ...] = EXCLUDED_LINE_PREDICATES) -> bool:
    return any(predicate(line) for predicate in predicates)
