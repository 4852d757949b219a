"""
# Dedlee: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for block rules and link rules.
"""

import abc
import re
from typing import Optional

from dedlee.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from dedlee.exceptions import CommittedMutateException, UncommittedApplyException
from dedlee.idioms import build_closing_marker, build_opening_marker
from dedlee.markup import Element, Node
from dedlee.normaliser import Line


class BlockRule(abc.ABC):
    """
    Base class for a block rule.

    A block rule classifies a line according to
    - «enclosing_kind»: the kind of the block directly containing the line,
    - «relative_index»: the number of lines already consumed in that block,
    - the line itself (its absolute index and its text),
    and renders it as an opening marker and, unless single-line, a closing marker.
    A multi-line rule's markers enclose the block of lines indented deeper than its line.
    """
    _id: str

    def __init__(self, id_: str):
        self._id = id_

    @property
    def id_(self) -> str:
        return self._id

    @property
    @abc.abstractmethod
    def kind(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def is_single_line(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def matches(self, enclosing_kind: str, relative_index: int, line: 'Line') -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def build_opening_marker(self, line: 'Line') -> str:
        raise NotImplementedError

    def build_closing_marker(self, line: 'Line') -> Optional[str]:
        """
        Build the closing marker, which is None exactly for single-line rules.
        """
        return None

    def build_node(self, line: 'Line') -> 'Node':
        return Element(self.kind, self.build_opening_marker(line), self.build_closing_marker(line))


class LinkRule(abc.ABC):
    """
    Base class for a link rule.

    A link rule replaces every placeholder of the form
            «opening_delimiter»«target»«middle_delimiter»«text»«closing_delimiter»
    with
            <«tag_name» «attribute_name»="«target»">«text»</«tag_name»>
    Both «target» and «text» are captured greedily unless lazy capture is enabled.
    """
    _is_committed: bool
    _id: str
    _lazy_capture_enabled: bool
    _verbose_mode_enabled: bool
    _regex_pattern_compiled: Optional[re.Pattern]

    def __init__(self, id_: str, verbose_mode_enabled: bool = False):
        self._is_committed = False
        self._id = id_
        self._lazy_capture_enabled = False
        self._verbose_mode_enabled = verbose_mode_enabled
        self._regex_pattern_compiled = None

    @property
    def id_(self) -> str:
        return self._id

    @property
    @abc.abstractmethod
    def opening_delimiter(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def middle_delimiter(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def closing_delimiter(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def tag_name(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def attribute_name(self) -> str:
        raise NotImplementedError

    @property
    def lazy_capture_enabled(self) -> bool:
        return self._lazy_capture_enabled

    @lazy_capture_enabled.setter
    def lazy_capture_enabled(self, value: bool):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `lazy_capture_enabled` after `commit()`')

        self._lazy_capture_enabled = value

    def commit(self):
        self._regex_pattern_compiled = re.compile(
            pattern=self.build_regex_pattern(
                self.opening_delimiter,
                self.middle_delimiter,
                self.closing_delimiter,
                self._lazy_capture_enabled,
            ),
            flags=re.VERBOSE,
        )
        self._is_committed = True

    @staticmethod
    def build_regex_pattern(opening_delimiter: str, middle_delimiter: str, closing_delimiter: str,
                            lazy_capture_enabled: bool) -> str:
        quantifier = '*?' if lazy_capture_enabled else '*'

        return (
            f'{re.escape(opening_delimiter)}'
            f'(?P<target> .{quantifier} )'
            f'{re.escape(middle_delimiter)}'
            f'(?P<text> .{quantifier} )'
            f'{re.escape(closing_delimiter)}'
        )

    def substitute(self, match: re.Match) -> str:
        opening_marker = build_opening_marker(self.tag_name, {self.attribute_name: match.group('target')})

        return f'{opening_marker}{match.group("text")}{build_closing_marker(self.tag_name)}'

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string_after = self._regex_pattern_compiled.sub(self.substitute, string)

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print('\n')

        return string_after
