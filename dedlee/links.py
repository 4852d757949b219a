"""
# Dedlee: links.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Link rules, and the rewriter that applies them to pages, paragraphs, and actions.
"""

from dedlee.bases import LinkRule
from dedlee.constants import LINK_BEARING_KINDS
from dedlee.markup import Document


class PageLinkRule(LinkRule):
    """
    A link turning to a page.

    Dedlee syntax:
    ````
    [[«page_id»]]«text»[[]]
    ````
    becomes
    ````
    <turn to="«page_id»">«text»</turn>
    ````
    """
    @property
    def opening_delimiter(self) -> str:
        return '[['

    @property
    def middle_delimiter(self) -> str:
        return ']]'

    @property
    def closing_delimiter(self) -> str:
        return '[[]]'

    @property
    def tag_name(self) -> str:
        return 'turn'

    @property
    def attribute_name(self) -> str:
        return 'to'


class ObjectLinkRule(LinkRule):
    """
    A link interacting with an object (or character).

    Dedlee syntax:
    ````
    {[«object_id»]}«text»{[]}
    ````
    becomes
    ````
    <interact with="«object_id»">«text»</interact>
    ````
    """
    @property
    def opening_delimiter(self) -> str:
        return '{['

    @property
    def middle_delimiter(self) -> str:
        return ']}'

    @property
    def closing_delimiter(self) -> str:
        return '{[]}'

    @property
    def tag_name(self) -> str:
        return 'interact'

    @property
    def attribute_name(self) -> str:
        return 'with'


class ParagraphLinkRule(LinkRule):
    """
    A link showing a paragraph.

    Dedlee syntax:
    ````
    ((«paragraph_id»))«text»(())
    ````
    becomes
    ````
    <show paragraph="«paragraph_id»">«text»</show>
    ````
    """
    @property
    def opening_delimiter(self) -> str:
        return '(('

    @property
    def middle_delimiter(self) -> str:
        return '))'

    @property
    def closing_delimiter(self) -> str:
        return '(())'

    @property
    def tag_name(self) -> str:
        return 'show'

    @property
    def attribute_name(self) -> str:
        return 'paragraph'


def build_standard_link_rules(lazy_capture_enabled: bool = False,
                              verbose_mode_enabled: bool = False) -> list['LinkRule']:
    link_rules = [
        PageLinkRule('page-link', verbose_mode_enabled),
        ObjectLinkRule('object-link', verbose_mode_enabled),
        ParagraphLinkRule('paragraph-link', verbose_mode_enabled),
    ]
    for link_rule in link_rules:
        link_rule.lazy_capture_enabled = lazy_capture_enabled
        link_rule.commit()

    return link_rules


class LinkRewriter:
    """
    Object rewriting link placeholders into links.

    Each link rule in turn is applied to every literal line
    inside a page, a paragraph, or an action, however deeply nested
    (so the lines of an object or a script tag within a page count).
    Literal lines outside these are left untouched,
    as are the markers of every element (so when clauses and titles never change).
    """
    _link_rules: list['LinkRule']

    def __init__(self, link_rules: list['LinkRule']):
        self._link_rules = list(link_rules)

    def rewrite(self, document: 'Document') -> 'Document':
        link_bearing_texts = list(document.iterate_texts_within(LINK_BEARING_KINDS))
        for link_rule in self._link_rules:
            for text in link_bearing_texts:
                text.content = link_rule.apply(text.content)

        return document
