"""
# Dedlee: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import re
import unittest

from dedlee.core import compile_document, dedlee_to_markup
from dedlee.exceptions import EmptySourceError
from dedlee.markup import Document

STORY = '''
# The Brass Lamp, a very short story

The Brass Lamp

initscript
    story.lampLit = false;

o.lamp "A brass lamp"
    "Examine"
        It is [[dark]]dusty[[]].
    "Rub"
        when !story.lampLit
        A genie appears; see ((genie))the genie(()).

c.genie "Genie"
    "Talk"
        "Your wish?" asks the genie.

p.start (first)
    A room, with a {[lamp]}lamp{[]} in it.
    pg.genie
        The genie grants a wish: [[end]]the end[[]].

p.end
    The end.
'''


def is_balanced(markup: str) -> bool:
    stack = []
    for line in markup.splitlines():
        opening_match = re.fullmatch(r'<(?P<name> [A-Za-z]+ ) [^<>]* >', line, flags=re.VERBOSE)
        closing_match = re.fullmatch(r'</(?P<name> [A-Za-z]+ )>', line, flags=re.VERBOSE)
        if opening_match is not None:
            stack.append(opening_match.group('name'))
        elif closing_match is not None:
            if len(stack) == 0 or stack.pop() != closing_match.group('name'):
                return False

    return len(stack) == 0


class TestCore(unittest.TestCase):
    def test_dedlee_to_markup(self):
        self.assertEqual(
            dedlee_to_markup(STORY),
            '''\
<title>The Brass Lamp</title>
<initscript>
    story.lampLit = false;
</initscript>
<obj id="lamp" inventoryName="A brass lamp">
<action id="Examine">
        It is <turn to="dark">dusty</turn>.
</action>
<action id="Rub">
<when>!story.lampLit</when>
        A genie appears; see <show paragraph="genie">the genie</show>.
</action>
</obj>
<character id="genie" inventoryName="Genie">
<action id="Talk">
        "Your wish?" asks the genie.
</action>
</character>
<page id="start" class="first">
    A room, with a <interact with="lamp">lamp</interact> in it.
<paragraph id="genie">
        The genie grants a wish: <turn to="end">the end</turn>.
</paragraph>
</page>
<page id="end">
    The end.
</page>
''',
        )

    def test_first_page(self):
        self.assertEqual(
            dedlee_to_markup('My Story\np.start (first)\n    Welcome text\n'),
            '<title>My Story</title>\n<page id="start" class="first">\n    Welcome text\n</page>\n',
        )

    def test_object_and_action(self):
        self.assertEqual(
            dedlee_to_markup('Story\no.lamp "A brass lamp"\n    "Examine"\n        It glows softly.\n'),
            '<title>Story</title>\n'
            '<obj id="lamp" inventoryName="A brass lamp">\n'
            '<action id="Examine">\n'
            '        It glows softly.\n'
            '</action>\n'
            '</obj>\n',
        )

    def test_page_links(self):
        markup = dedlee_to_markup('Story\np.a\n    [[b]]Go to B[[]]\np.b\n    The end\n')
        self.assertIn('<page id="a">\n    <turn to="b">Go to B</turn>\n</page>\n', markup)
        self.assertIn('<page id="b">\n    The end\n</page>\n', markup)

    def test_empty_source(self):
        with self.assertRaises(EmptySourceError):
            dedlee_to_markup('\n   \n# comment\n\t# comment\n')

    def test_when_position(self):
        markup = dedlee_to_markup('Story\no.x\n    "Use"\n        It works.\n        when ready\n')
        self.assertIn('        It works.\n        when ready\n', markup)
        self.assertNotIn('<when>', markup)

    def test_links_confined_to_scope(self):
        markup = dedlee_to_markup(
            'Story\n'
            'beforeEveryPageTurn\n'
            '    [[a]]script[[]]\n'
            'o.x\n'
            '    [[a]]object[[]]\n'
            '    "Use"\n'
            '        when [[a]]condition[[]]\n'
            '        [[a]]action[[]]\n'
        )
        self.assertIn('\n    [[a]]script[[]]\n', markup)
        self.assertIn('\n    [[a]]object[[]]\n', markup)
        self.assertIn('<when>[[a]]condition[[]]</when>', markup)
        self.assertIn('<turn to="a">action</turn>', markup)

    def test_links_nested_in_page(self):
        markup = dedlee_to_markup(
            'Story\n'
            'p.room\n'
            '    o.lamp\n'
            '        [[b]]go[[]]\n'
            '    afterEveryPageTurn\n'
            '        {[lamp]}rub{[]}\n'
        )
        self.assertIn('\n        <turn to="b">go</turn>\n', markup)
        self.assertIn('\n        <interact with="lamp">rub</interact>\n', markup)

    def test_script_keeps_relative_indentation(self):
        self.assertEqual(
            dedlee_to_markup('Story\ninitscript\n    if (x) {\n        y();\n    }\n'),
            '<title>Story</title>\n<initscript>\n    if (x) {\n        y();\n    }\n</initscript>\n',
        )

    def test_indentation_invariance(self):
        indented_story = '\n'.join(f'      {line}' if line.strip() else line for line in STORY.splitlines())
        self.assertEqual(dedlee_to_markup(indented_story), dedlee_to_markup(STORY))

        tabbed_story = '\n'.join(f'\t{line}' for line in STORY.splitlines())
        self.assertEqual(dedlee_to_markup(tabbed_story), dedlee_to_markup(STORY))

    def test_balanced_nesting(self):
        self.assertTrue(is_balanced(dedlee_to_markup(STORY)))

        deep_source = 'Story\n' + ''.join(f'{"  " * depth}p.level{depth}\n' for depth in range(200))
        deep_markup = dedlee_to_markup(deep_source)
        self.assertTrue(is_balanced(deep_markup))
        self.assertEqual(deep_markup.count('<page '), 200)
        self.assertEqual(deep_markup.count('</page>'), 200)

    def test_totality(self):
        for source in [
            'x',
            '"',
            'when',
            'o.',
            'Story\n    o.\n  c.\n"\np.\n        pg.\n  when\n\t"a"',
            'Story\n[[[[]]]]\n{[{[]}]}\n(((())))',
        ]:
            self.assertIsInstance(dedlee_to_markup(source), str)

    def test_lazy_links(self):
        source = 'Story\np.a\n    [[b]]B[[]] or [[c]]C[[]]\n'
        self.assertIn('<turn to="b]]B[[]] or [[c">C</turn>', dedlee_to_markup(source))
        self.assertIn(
            '<turn to="b">B</turn> or <turn to="c">C</turn>',
            dedlee_to_markup(source, lazy_links_enabled=True),
        )

    def test_compile_document(self):
        document = compile_document('Story\np.a\n    [[b]]Go[[]]\n')
        self.assertIsInstance(document, Document)
        pages = list(document.iterate_elements(['page']))
        self.assertEqual(len(pages), 1)
        self.assertEqual([text.content for text in pages[0].iterate_texts()], ['    <turn to="b">Go</turn>'])


if __name__ == '__main__':
    unittest.main()
