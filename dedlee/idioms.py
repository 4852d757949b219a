"""
# Dedlee: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms for building markers.
"""

from typing import Optional

from dedlee.utilities import escape_attribute_value_html


def build_attributes_sequence(value_from_name: dict[str, Optional[str]]) -> str:
    """
    Build a sequence of attributes, each preceded by a space.

    Attributes whose value is None are omitted.
    """
    return ''.join(
        f' {name}="{escape_attribute_value_html(value)}"'
        for name, value in value_from_name.items()
        if value is not None
    )


def build_opening_marker(tag_name: str, value_from_name: Optional[dict[str, Optional[str]]] = None) -> str:
    attributes_sequence = build_attributes_sequence(value_from_name or {})

    return f'<{tag_name}{attributes_sequence}>'


def build_closing_marker(tag_name: str) -> str:
    return f'</{tag_name}>'


def build_wrapped_marker(tag_name: str, content: str,
                         value_from_name: Optional[dict[str, Optional[str]]] = None) -> str:
    opening_marker = build_opening_marker(tag_name, value_from_name)
    closing_marker = build_closing_marker(tag_name)

    return f'{opening_marker}{content}{closing_marker}'
