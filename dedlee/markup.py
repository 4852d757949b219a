"""
# Dedlee: markup.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The materialised markup tree.

A `Document` holds the nodes produced by the block parser:
- an `Element` for every block rule match (single-line or not), holding its markers
  and, for multi-line rules, the nodes of its block;
- a `Text` for every literal line.
Elements are never restructured once built; only the content of `Text` nodes is rewritten,
by the link rewriter.
"""

import abc
from typing import Iterable, Optional

from dedlee.constants import OTHER_KIND, ROOT_KIND


class Node(abc.ABC):
    """
    Base class for a node of the markup tree.
    """
    _kind: str

    def __init__(self, kind: str):
        self._kind = kind

    @property
    def kind(self) -> str:
        return self._kind

    @abc.abstractmethod
    def serialise_lines(self) -> list[str]:
        """
        Serialise the node to lines of markup.
        """
        raise NotImplementedError


class Text(Node):
    """
    A literal line, copied through as it is (save for link rewriting).
    """
    _content: str

    def __init__(self, content: str):
        super().__init__(OTHER_KIND)
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str):
        self._content = value

    def serialise_lines(self) -> list[str]:
        return [self._content]


class Element(Node):
    """
    A tag-delimited node.

    An element without closing marker is single-line:
    its opening marker is the whole of its markup, and it has no children.
    """
    _opening_marker: Optional[str]
    _closing_marker: Optional[str]
    _children: list['Node']

    def __init__(self, kind: str, opening_marker: Optional[str], closing_marker: Optional[str] = None):
        super().__init__(kind)
        self._opening_marker = opening_marker
        self._closing_marker = closing_marker
        self._children = []

    @property
    def opening_marker(self) -> Optional[str]:
        return self._opening_marker

    @property
    def closing_marker(self) -> Optional[str]:
        return self._closing_marker

    @property
    def children(self) -> list['Node']:
        return self._children

    @property
    def is_single_line(self) -> bool:
        return self._closing_marker is None

    def append(self, node: 'Node'):
        if self.is_single_line and self._opening_marker is not None:
            raise TypeError(f'error: cannot append to single-line element of kind `{self.kind}`')

        self._children.append(node)

    def iterate_texts(self) -> Iterable['Text']:
        """
        Iterate over the literal lines directly inside this element.
        """
        for child in self._children:
            if isinstance(child, Text):
                yield child

    def iterate_texts_within(self, kinds: Iterable[str], is_within: bool = False) -> Iterable['Text']:
        """
        Iterate over the literal lines inside this element (at any depth)
        that have an element of one of `kinds` among their ancestors.

        Every such line is yielded exactly once, however many such ancestors it has.
        """
        kinds = frozenset(kinds)
        is_within = is_within or self.kind in kinds

        for child in self._children:
            if isinstance(child, Text):
                if is_within:
                    yield child
            elif isinstance(child, Element):
                yield from child.iterate_texts_within(kinds, is_within)

    def iterate_elements(self, kinds: Optional[Iterable[str]] = None) -> Iterable['Element']:
        """
        Iterate (post-order) over the elements strictly inside this element.

        If `kinds` is given, only elements of those kinds are yielded.
        """
        if kinds is not None:
            kinds = frozenset(kinds)

        for child in self._children:
            if isinstance(child, Element):
                yield from child.iterate_elements(kinds)
                if kinds is None or child.kind in kinds:
                    yield child

    def serialise_lines(self) -> list[str]:
        lines = []
        if self._opening_marker is not None:
            lines.append(self._opening_marker)
        for child in self._children:
            lines.extend(child.serialise_lines())
        if self._closing_marker is not None:
            lines.append(self._closing_marker)

        return lines


class Document(Element):
    """
    The root of the markup tree, itself free of markers.
    """
    def __init__(self):
        super().__init__(ROOT_KIND, opening_marker=None, closing_marker=None)

    def to_markup(self) -> str:
        return ''.join(f'{line}\n' for line in self.serialise_lines())
