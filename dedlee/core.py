"""
# Dedlee: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

Dedlee source is converted to markup in three stages:
(1) normalisation, see `normaliser.py`;
(2) block parsing into a markup tree, see `parser.py` and `rules.py`;
(3) link rewriting within pages, paragraphs, and actions, see `links.py`.
"""

from dedlee.links import LinkRewriter, build_standard_link_rules
from dedlee.markup import Document
from dedlee.normaliser import normalise
from dedlee.parser import BlockParser
from dedlee.rules import build_standard_block_rules


def compile_document(source: str, source_name: str = '',
                     verbose_mode_enabled: bool = False, lazy_links_enabled: bool = False) -> Document:
    """
    Convert dedlee source to a markup tree.

    Raises `EmptySourceError` if the source has nothing but blank lines and comments.
    """
    lines = normalise(source, source_name)

    block_parser = BlockParser(lines, build_standard_block_rules(), verbose_mode_enabled)
    document = block_parser.parse()

    link_rules = build_standard_link_rules(lazy_links_enabled, verbose_mode_enabled)
    LinkRewriter(link_rules).rewrite(document)

    return document


def dedlee_to_markup(source: str, source_name: str = '',
                     verbose_mode_enabled: bool = False, lazy_links_enabled: bool = False) -> str:
    """
    Convert dedlee source to markup.
    """
    document = compile_document(source, source_name, verbose_mode_enabled, lazy_links_enabled)

    return document.to_markup()
