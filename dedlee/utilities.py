"""
# Dedlee: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional


def compute_indentation_level(line: str) -> int:
    """
    Compute the number of leading whitespace characters of a line.

    Tabs and spaces alike count as one character each.
    """
    return len(line) - len(line.lstrip())


def escape_attribute_value_html(value: str) -> str:
    """
    Escape an attribute value that will be delimited by double quotes.

    For speed, we make the following assumptions:
    - Entity names are any run of up to 31 letters.
    - Decimal code points are any run of up to 7 digits.
    - Hexadecimal code points are any run of up to 6 digits.
    """
    value = re.sub(
        pattern='''
            [&]
            (?!
                (?:
                    [a-zA-Z]{1,31}
                        |
                    [#] (?: [0-9]{1,7} | [xX] [0-9a-fA-F]{1,6} )
                )
                [;]
            )
        ''',
        repl='&amp;',
        string=value,
        flags=re.VERBOSE,
    )
    value = re.sub(pattern='<', repl='&lt;', string=value)
    value = re.sub(pattern='>', repl='&gt;', string=value)
    value = re.sub(pattern='"', repl='&quot;', string=value)

    return value


def extract_first_token(string: str) -> str:
    """
    Extract the part of a string before its first space.
    """
    return string.split(' ', 1)[0]


def extract_first_quoted(string: str) -> Optional[str]:
    """
    Extract the content between the first and the last double quote of a string.

    An empty content counts as absent.
    """
    match = re.search(pattern=r'"(?P<content> .* )"', string=string, flags=re.VERBOSE)
    if match is None:
        return None

    return match.group('content') or None


def is_comment(line: str) -> bool:
    return line.strip().startswith('#')


def is_whitespace_only(line: str) -> bool:
    return line.strip() == ''
