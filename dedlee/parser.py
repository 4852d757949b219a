"""
# Dedlee: parser.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Indentation-driven block parsing.
"""

from typing import Optional

from dedlee.bases import BlockRule
from dedlee.constants import ROOT_KIND
from dedlee.markup import Document, Element
from dedlee.normaliser import Line


class BlockParser:
    """
    Object turning normalised lines into a markup tree.

    A block is the run of lines, starting at some line, whose indentation is
    at least that of the starting line and greater than that of the line triggering the block.
    Every line of a block is classified by the first block rule that matches it;
    for a multi-line rule, the lines indented deeper than it form its own (nested) block.

    The cursor over the lines is shared by all (recursive) calls to `parse_block`,
    and only ever moves forward.
    """
    _lines: list['Line']
    _block_rules: list['BlockRule']
    _cursor: int
    _verbose_mode_enabled: bool

    def __init__(self, lines: list['Line'], block_rules: list['BlockRule'], verbose_mode_enabled: bool = False):
        self._lines = lines
        self._block_rules = block_rules
        self._cursor = 0
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def cursor(self) -> int:
        return self._cursor

    def current_line(self) -> Optional['Line']:
        try:
            return self._lines[self._cursor]
        except IndexError:
            return None

    def select_rule(self, enclosing_kind: str, relative_index: int, line: 'Line') -> 'BlockRule':
        for block_rule in self._block_rules:
            if block_rule.matches(enclosing_kind, relative_index, line):
                return block_rule

        raise ValueError(f'error: line {line.number}: no block rule matches (is a catch-all rule missing?)')

    def parse(self) -> 'Document':
        """
        Parse every line into a document.

        The top-level block takes in every line, however indented.
        """
        self._cursor = 0
        document = Document()
        self.parse_block(ROOT_KIND, document, trigger_indentation=-1, initial_indentation=0)

        return document

    def parse_block(self, enclosing_kind: str, parent: 'Element',
                    trigger_indentation: int, initial_indentation: Optional[int] = None):
        """
        Parse the block starting at the cursor into `parent`, leaving the cursor just past the block.

        A block is empty if the line at the cursor is not indented deeper than `trigger_indentation`.
        """
        line = self.current_line()
        if line is None or line.indentation <= trigger_indentation:
            return

        if initial_indentation is None:
            initial_indentation = line.indentation

        relative_index = 0
        while line is not None and line.indentation >= initial_indentation:
            block_rule = self.select_rule(enclosing_kind, relative_index, line)
            if self._verbose_mode_enabled:
                print(f'line {line.number}: #{block_rule.id_} in {enclosing_kind or "ROOT"}')

            node = block_rule.build_node(line)
            parent.append(node)
            self._cursor += 1

            if not block_rule.is_single_line:
                self.parse_block(block_rule.kind, node, trigger_indentation=line.indentation)

            relative_index += 1
            line = self.current_line()
