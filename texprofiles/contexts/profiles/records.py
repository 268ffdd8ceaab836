"""
Profile Records

Static export profiles mapping a profile name to a LaTeX document class and a
heading map. The heading map is indexed by heading depth (depth 1 first) and
holds (numbered, starred) command templates, with "%s" standing for the heading
title.

The document class header is rendered with Jinja2 using LaTeX-safe delimiters
so that LaTeX braces in templates never collide with template syntax:
- Variable: <<< var >>>
- Block: <%% block %%>
"""

from dataclasses import dataclass
from typing import Tuple

from jinja2 import Environment, StrictUndefined

HeadingPair = Tuple[str, str]

_env = Environment(
    undefined=StrictUndefined,
    variable_start_string="<<<",
    variable_end_string=">>>",
    block_start_string="<%%",
    block_end_string="%%>",
    comment_start_string="<#",
    comment_end_string="#>",
    trim_blocks=False,
    lstrip_blocks=False,
    keep_trailing_newline=False,
)

HEADER_TEMPLATE = _env.from_string(
    r"\documentclass<%% if class_options %%>[<<< class_options >>>]<%% endif %%>{<<< document_class >>>}"
)


@dataclass(frozen=True)
class ProfileRecord:
    """
    Immutable export profile.

    Attributes:
        name: Profile name declared by documents (e.g., 'report')
        document_class: LaTeX document class the profile exports to
        heading_map: (numbered, starred) command templates, one pair per heading depth
        class_options: Optional options passed to \\documentclass
    """

    name: str
    document_class: str
    heading_map: Tuple[HeadingPair, ...]
    class_options: str = ""

    @property
    def header(self) -> str:
        """Render the \\documentclass line for this profile."""
        return HEADER_TEMPLATE.render(
            document_class=self.document_class,
            class_options=self.class_options,
        )

    @property
    def max_depth(self) -> int:
        return len(self.heading_map)

    def heading_command(self, depth: int, title: str, numbered: bool = True) -> str:
        """
        Format the LaTeX sectioning command for a heading.

        Args:
            depth: Heading depth, 1 for top-level headings
            title: Heading title inserted into the command template
            numbered: Use the numbered variant (False selects the starred one)

        Returns:
            LaTeX command string (e.g., '\\chapter{Intro}')

        Raises:
            ValueError: If depth is outside the profile's heading map
        """
        if depth < 1 or depth > self.max_depth:
            raise ValueError(
                f"Heading depth {depth} is outside profile '{self.name}' "
                f"(supported depths: 1-{self.max_depth})"
            )

        numbered_template, starred_template = self.heading_map[depth - 1]
        template = numbered_template if numbered else starred_template
        return template % title


REPORT_PROFILE = ProfileRecord(
    name="report",
    document_class="tpreport",
    heading_map=(
        (r"\chapter{%s}", r"\chapter*{%s}"),
        (r"\section{%s}", r"\section*{%s}"),
        (r"\subsection{%s}", r"\subsection*{%s}"),
        (r"\subsubsection{%s}", r"\subsubsection*{%s}"),
        (r"\paragraph{%s}", r"\paragraph*{%s}"),
    ),
)

BOOK_PROFILE = ProfileRecord(
    name="book",
    document_class="tpbook",
    heading_map=(
        (r"\part{%s}", r"\part*{%s}"),
        (r"\chapter{%s}", r"\chapter*{%s}"),
        (r"\section{%s}", r"\section*{%s}"),
        (r"\subsection{%s}", r"\subsection*{%s}"),
        (r"\subsubsection{%s}", r"\subsubsection*{%s}"),
    ),
)

DEFAULT_PROFILES = (REPORT_PROFILE, BOOK_PROFILE)
PROFILE_NAMES = tuple(profile.name for profile in DEFAULT_PROFILES)
