import os
import unittest

from twinpane.browser.marks import MarkSet


class MarkSetTests(unittest.TestCase):
    def test_toggle_twice_restores_prior_state(self):
        marks = MarkSet()
        marks.toggle('/data/keep.txt')
        before = marks.snapshot()

        self.assertTrue(marks.toggle('/data/readme.txt'))
        self.assertFalse(marks.toggle('/data/readme.txt'))

        self.assertEqual(marks.snapshot(), before)

    def test_marks_are_keyed_by_absolute_path(self):
        marks = MarkSet()
        marks.toggle('/a/readme.txt')

        self.assertIn('/a/readme.txt', marks)
        self.assertNotIn('/b/readme.txt', marks)

    def test_relative_paths_are_normalized(self):
        marks = MarkSet()
        marks.toggle('notes.txt')
        self.assertIn(os.path.join(os.getcwd(), 'notes.txt'), marks)

    def test_iteration_is_sorted(self):
        marks = MarkSet()
        for path in ('/x/c', '/x/a', '/x/b'):
            marks.toggle(path)
        self.assertEqual(list(marks), ['/x/a', '/x/b', '/x/c'])
        self.assertEqual(len(marks), 3)

    def test_clear_and_discard(self):
        marks = MarkSet()
        marks.toggle('/x/a')
        marks.toggle('/x/b')

        marks.discard('/x/a')
        marks.discard('/x/missing')
        self.assertEqual(list(marks), ['/x/b'])

        marks.clear()
        self.assertFalse(marks)

    def test_roots_fold_marked_children_into_marked_directory(self):
        marks = MarkSet()
        for path in ('/a/c', '/a', '/a b', '/a/c/d', '/x/y'):
            marks.toggle(path)

        self.assertEqual(marks.roots(), ['/a', '/a b', '/x/y'])
        self.assertEqual(len(marks), 5)


if __name__ == '__main__':
    unittest.main()
