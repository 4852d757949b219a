"""
# Dedlee: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Block rules, in the order in which they are tried (first match wins).
"""

from typing import Optional

from dedlee.bases import BlockRule
from dedlee.constants import (
    ACTION_KIND,
    CHARACTER_KIND,
    FIRST_PAGE_MARKER,
    OBJECT_KIND,
    OTHER_KIND,
    PAGE_KIND,
    PARAGRAPH_KIND,
    SCRIPT_TAG_KIND,
    SCRIPT_TAG_NAMES,
    TITLE_KIND,
    WHEN_KIND,
)
from dedlee.idioms import build_closing_marker, build_opening_marker, build_wrapped_marker
from dedlee.markup import Node, Text
from dedlee.normaliser import Line
from dedlee.utilities import extract_first_quoted, extract_first_token


class TitleRule(BlockRule):
    """
    The story title, which is the very first line.

    Dedlee syntax:
    ````
    «title»
    ````
    """
    @property
    def kind(self) -> str:
        return TITLE_KIND

    @property
    def is_single_line(self) -> bool:
        return True

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return line.index == 0

    def build_opening_marker(self, line: 'Line') -> str:
        return build_wrapped_marker('title', line.text)


class ScriptTagRule(BlockRule):
    """
    A lifecycle hook, whose block is script.

    Dedlee syntax:
    ````
    initscript | beforeEveryThing | afterEveryThing | beforeEveryPageTurn | afterEveryPageTurn
            | beforeEveryParagraphShown | afterEveryParagraphShown
        «script»
    ````
    """
    @property
    def kind(self) -> str:
        return SCRIPT_TAG_KIND

    @property
    def is_single_line(self) -> bool:
        return False

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return line.content in SCRIPT_TAG_NAMES

    def build_opening_marker(self, line: 'Line') -> str:
        return build_opening_marker(line.content)

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        return build_closing_marker(line.content)


class ObjectRule(BlockRule):
    """
    An object, with an optional name for display in the inventory.

    Dedlee syntax:
    ````
    o.«id» "«inventory_name»"
        «actions and content»
    ````
    """
    PREFIX = 'o.'
    TAG_NAME = 'obj'

    @property
    def kind(self) -> str:
        return OBJECT_KIND

    @property
    def is_single_line(self) -> bool:
        return False

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return line.content.startswith(self.PREFIX)

    def build_opening_marker(self, line: 'Line') -> str:
        id_ = extract_first_token(line.content)[len(self.PREFIX):]
        inventory_name = extract_first_quoted(line.content)

        return build_opening_marker(self.TAG_NAME, {'id': id_, 'inventoryName': inventory_name})

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        return build_closing_marker(self.TAG_NAME)


class CharacterRule(ObjectRule):
    """
    A character, which is marked up just like an object.

    Dedlee syntax:
    ````
    c.«id» "«inventory_name»"
        «actions and content»
    ````
    """
    PREFIX = 'c.'
    TAG_NAME = 'character'

    @property
    def kind(self) -> str:
        return CHARACTER_KIND


class ActionRule(BlockRule):
    """
    An action upon the directly enclosing object or character.

    Dedlee syntax:
    ````
    "«id»"
        «when clause (optional)»
        «content»
    ````
    """
    @property
    def kind(self) -> str:
        return ACTION_KIND

    @property
    def is_single_line(self) -> bool:
        return False

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return enclosing_kind in (OBJECT_KIND, CHARACTER_KIND) and line.content.startswith('"')

    def build_opening_marker(self, line: 'Line') -> str:
        return build_opening_marker('action', {'id': line.content.replace('"', '')})

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        return build_closing_marker('action')


class WhenRule(BlockRule):
    """
    The condition of the directly enclosing action, only recognised as its very first line.

    Dedlee syntax:
    ````
    when «condition»
    ````
    """
    KEYWORD = 'when'

    @property
    def kind(self) -> str:
        return WHEN_KIND

    @property
    def is_single_line(self) -> bool:
        return True

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return enclosing_kind == ACTION_KIND and line.content.startswith(self.KEYWORD) and relative_index == 0

    def build_opening_marker(self, line: 'Line') -> str:
        condition = line.content
        if condition.startswith(f'{self.KEYWORD} '):
            condition = condition[len(self.KEYWORD) + 1:]

        return build_wrapped_marker('when', condition)


class PageRule(BlockRule):
    """
    A page, optionally designated as the first page.

    Dedlee syntax:
    ````
    p.«id» (first)
        «content»
    ````
    """
    PREFIX = 'p.'

    @property
    def kind(self) -> str:
        return PAGE_KIND

    @property
    def is_single_line(self) -> bool:
        return False

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return line.content.startswith(self.PREFIX)

    def build_opening_marker(self, line: 'Line') -> str:
        id_ = extract_first_token(line.content)[len(self.PREFIX):]
        class_ = 'first' if FIRST_PAGE_MARKER in line.content else None

        return build_opening_marker('page', {'id': id_, 'class': class_})

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        return build_closing_marker('page')


class ParagraphRule(BlockRule):
    """
    A paragraph, shown on demand.

    Dedlee syntax:
    ````
    pg.«id»
        «content»
    ````
    """
    PREFIX = 'pg.'

    @property
    def kind(self) -> str:
        return PARAGRAPH_KIND

    @property
    def is_single_line(self) -> bool:
        return False

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return line.content.startswith(self.PREFIX)

    def build_opening_marker(self, line: 'Line') -> str:
        id_ = extract_first_token(line.content)[len(self.PREFIX):]

        return build_opening_marker('paragraph', {'id': id_})

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        return build_closing_marker('paragraph')


class LiteralRule(BlockRule):
    """
    Anything else, copied through as it is
    (relative indentation included, so that script bodies keep their layout).
    """
    @property
    def kind(self) -> str:
        return OTHER_KIND

    @property
    def is_single_line(self) -> bool:
        return True

    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        return True

    def build_opening_marker(self, line: 'Line') -> str:
        return line.text

    def build_node(self, line: 'Line') -> 'Node':
        return Text(self.build_opening_marker(line))


def build_standard_block_rules() -> list['BlockRule']:
    """
    Build the block rules in priority order.

    The order matters: for instance, `p.«id»` inside an object is a page
    (not an action), and `when` only counts inside an action.
    """
    return [
        TitleRule('title'),
        ScriptTagRule('script-tag'),
        ObjectRule('object'),
        CharacterRule('character'),
        ActionRule('action'),
        WhenRule('when'),
        PageRule('page'),
        ParagraphRule('paragraph'),
        LiteralRule('other'),
    ]
