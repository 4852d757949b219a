"""
# Dedlee: test_idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `idioms.py`.
"""

import unittest

from dedlee.idioms import build_attributes_sequence, build_closing_marker, build_opening_marker, build_wrapped_marker


class TestIdioms(unittest.TestCase):
    def test_build_attributes_sequence(self):
        self.assertEqual(build_attributes_sequence({}), '')
        self.assertEqual(build_attributes_sequence({'id': 'a', 'class': None}), ' id="a"')
        self.assertEqual(build_attributes_sequence({'id': ''}), ' id=""')
        self.assertEqual(
            build_attributes_sequence({'id': 'lamp', 'inventoryName': 'A "brass" lamp'}),
            ' id="lamp" inventoryName="A &quot;brass&quot; lamp"',
        )

    def test_build_opening_marker(self):
        self.assertEqual(build_opening_marker('initscript'), '<initscript>')
        self.assertEqual(build_opening_marker('page', {'id': 'start', 'class': 'first'}), '<page id="start" class="first">')
        self.assertEqual(build_opening_marker('page', {'id': 'end', 'class': None}), '<page id="end">')

    def test_build_closing_marker(self):
        self.assertEqual(build_closing_marker('obj'), '</obj>')

    def test_build_wrapped_marker(self):
        self.assertEqual(build_wrapped_marker('title', 'My Story'), '<title>My Story</title>')
        self.assertEqual(build_wrapped_marker('turn', 'Go', {'to': 'b'}), '<turn to="b">Go</turn>')


if __name__ == '__main__':
    unittest.main()
