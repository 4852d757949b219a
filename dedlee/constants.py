"""
# Dedlee: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

ROOT_KIND = ''

TITLE_KIND = 'title'
SCRIPT_TAG_KIND = 'scriptTag'
OBJECT_KIND = 'object'
CHARACTER_KIND = 'character'
ACTION_KIND = 'action'
WHEN_KIND = 'when'
PAGE_KIND = 'page'
PARAGRAPH_KIND = 'paragraph'
OTHER_KIND = 'other'

SCRIPT_TAG_NAMES = (
    'initscript',
    'beforeEveryThing',
    'beforeEveryPageTurn',
    'beforeEveryParagraphShown',
    'afterEveryThing',
    'afterEveryPageTurn',
    'afterEveryParagraphShown',
)
LINK_BEARING_KINDS = (PAGE_KIND, PARAGRAPH_KIND, ACTION_KIND)

FIRST_PAGE_MARKER = '(first)'

DEDLEE_SYNTAX_HELP = '''\
In dedlee syntax, nesting is given by indentation, and a line is one of the following:
(1) blank, or a comment (beginning with `#`), both of which are ignored;
(2) the story title (the very first line);
(3) a script tag (`initscript`, `beforeEveryThing`, `afterEveryThing`,
    `beforeEveryPageTurn`, `afterEveryPageTurn`,
    `beforeEveryParagraphShown`, `afterEveryParagraphShown`);
(4) an object (`o.«id» "«inventory_name»"`) or a character (`c.«id» "«inventory_name»"`);
(5) an action (`"«id»"`), directly inside an object or character;
(6) a when clause (`when «condition»`), as the first line of an action;
(7) a page (`p.«id»`, optionally followed by `(first)`);
(8) a paragraph (`pg.«id»`);
(9) anything else, which is copied through as it is.
- Note for (4): the inventory name is optional.
- Within pages, paragraphs, and actions, the following links are recognised:
  `[[«page_id»]]«text»[[]]`, `{[«object_id»]}«text»{[]}`,
  and `((«paragraph_id»))«text»(())`.
'''
