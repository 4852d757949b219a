"""
# Dedlee: normaliser.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Source normalisation.

Dedlee source is normalised as follows:
(1) the source is split into lines on runs of carriage returns and line feeds;
(2) whitespace-only lines and comments (lines beginning with `#`) are discarded;
(3) the least indentation among the remaining lines is removed from every line;
(4) trailing whitespace is removed from every line.
Since (2) precedes (3), neither blank lines nor comments affect indentation.
"""

import re
from typing import NamedTuple

from dedlee.exceptions import EmptySourceError
from dedlee.utilities import compute_indentation_level, is_comment, is_whitespace_only


class Line(NamedTuple):
    """
    A normalised line of dedlee source.

    - `index`: position among the normalised lines (counting from 0)
    - `indentation`: number of leading whitespace characters after normalisation
    - `text`: the normalised line, leading whitespace included
    """
    index: int
    indentation: int
    text: str

    @property
    def content(self) -> str:
        return self.text[self.indentation:]

    @property
    def number(self) -> int:
        return self.index + 1


def split_lines(source: str) -> list[str]:
    return re.findall(pattern=r'[^\r\n]+', string=source)


def remove_whitespace_only_lines_and_comments(lines: list[str]) -> list[str]:
    return [
        line
        for line in lines
        if not is_whitespace_only(line) and not is_comment(line)
    ]


def indent_to_min(lines: list[str]) -> list[str]:
    """
    Align lines to the left by removing their least indentation.

    For example
    ````
        AAA
            BBB
        CCC
    ````
    becomes
    ````
    AAA
        BBB
    CCC
    ````
    """
    min_indentation = min(compute_indentation_level(line) for line in lines)

    return [line[min_indentation:].rstrip() for line in lines]


def normalise(source: str, source_name: str = '') -> list['Line']:
    """
    Normalise dedlee source into a sequence of lines.

    Raises `EmptySourceError` if no lines remain once blank lines and comments are discarded.
    """
    lines = remove_whitespace_only_lines_and_comments(split_lines(source))
    if len(lines) == 0:
        raise EmptySourceError(source_name)

    return [
        Line(index, compute_indentation_level(text), text)
        for index, text in enumerate(indent_to_min(lines))
    ]
