import os
import tempfile
import unittest
from unittest import mock

from _support import make_tree

from twinpane.browser.lister import EntryLister
from twinpane.browser.operations import FileOpsEngine
from twinpane.core.errors import AlreadyExists, CreateError, DeleteError, EmptyName, RenameError


class FileOpsEngineTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = self.tmp.name
        self.lister = mock.Mock(spec=EntryLister)
        self.ops = FileOpsEngine(self.lister)

    def test_create_file_makes_empty_file(self):
        path = self.ops.create_file(self.base, 'notes.txt')

        self.assertEqual(path, os.path.join(self.base, 'notes.txt'))
        self.assertTrue(os.path.isfile(path))
        self.assertEqual(os.path.getsize(path), 0)
        self.lister.invalidate.assert_called_once_with(self.base)

    def test_create_directory(self):
        path = self.ops.create_directory(self.base, 'build')

        self.assertTrue(os.path.isdir(path))
        self.lister.invalidate.assert_called_once_with(self.base)

    def test_create_refuses_existing_name(self):
        make_tree(self.base, {'taken': ''})

        with self.assertRaises(AlreadyExists) as ctx:
            self.ops.create_file(self.base, 'taken')
        self.assertEqual(ctx.exception.message, 'Error: Already exists!')
        with self.assertRaises(AlreadyExists):
            self.ops.create_directory(self.base, 'taken')
        self.lister.invalidate.assert_not_called()

    def test_empty_or_blank_name_is_rejected(self):
        for name in ('', '   '):
            with self.assertRaises(EmptyName) as ctx:
                self.ops.create_file(self.base, name)
            self.assertEqual(ctx.exception.message, 'Error: Name cannot be empty!')
        self.assertEqual(os.listdir(self.base), [])

    def test_create_in_missing_directory_reports_create_error(self):
        missing = os.path.join(self.base, 'gone')

        with self.assertRaises(CreateError) as ctx:
            self.ops.create_file(missing, 'a.txt')
        self.assertIn(missing, ctx.exception.message)

        with self.assertRaises(CreateError):
            self.ops.create_directory(missing, 'sub')

    def test_rename_moves_within_directory(self):
        make_tree(self.base, {'old.txt': 'data'})
        old = os.path.join(self.base, 'old.txt')

        new = self.ops.rename(old, 'new.txt')

        self.assertEqual(new, os.path.join(self.base, 'new.txt'))
        self.assertFalse(os.path.exists(old))
        with open(new, encoding='utf-8') as fh:
            self.assertEqual(fh.read(), 'data')
        self.lister.invalidate.assert_called_once_with(self.base)

    def test_rename_onto_existing_name_fails_without_touching_either(self):
        make_tree(self.base, {'a.txt': 'A', 'b.txt': 'B'})

        with self.assertRaises(AlreadyExists):
            self.ops.rename(os.path.join(self.base, 'a.txt'), 'b.txt')

        with open(os.path.join(self.base, 'b.txt'), encoding='utf-8') as fh:
            self.assertEqual(fh.read(), 'B')
        self.assertTrue(os.path.exists(os.path.join(self.base, 'a.txt')))

    def test_rename_missing_source_raises_rename_error(self):
        with self.assertRaises(RenameError):
            self.ops.rename(os.path.join(self.base, 'ghost'), 'other')

    def test_rename_to_empty_name_is_rejected(self):
        make_tree(self.base, {'a.txt': ''})
        with self.assertRaises(EmptyName):
            self.ops.rename(os.path.join(self.base, 'a.txt'), '')

    def test_delete_file(self):
        make_tree(self.base, {'a.txt': 'x'})
        path = os.path.join(self.base, 'a.txt')

        self.assertTrue(self.ops.delete(path))

        self.assertFalse(os.path.exists(path))
        self.lister.invalidate.assert_called_once_with(self.base)

    def test_delete_directory_tree(self):
        make_tree(self.base, {'tree': {'inner': {'deep.txt': 'x'}, 'top.txt': 'y'}})
        path = os.path.join(self.base, 'tree')

        self.ops.delete(path)

        self.assertFalse(os.path.exists(path))

    def test_delete_symlink_to_directory_keeps_target(self):
        make_tree(self.base, {'target': {'keep.txt': 'x'}})
        link = os.path.join(self.base, 'link')
        os.symlink(os.path.join(self.base, 'target'), link)

        self.ops.delete(link)

        self.assertFalse(os.path.lexists(link))
        self.assertTrue(os.path.exists(os.path.join(self.base, 'target', 'keep.txt')))

    def test_delete_missing_path_raises_delete_error(self):
        path = os.path.join(self.base, 'ghost')
        with self.assertRaises(DeleteError) as ctx:
            self.ops.delete(path)
        self.assertIn('ghost', ctx.exception.message)

    def test_delete_many_continues_past_failures(self):
        make_tree(self.base, {'a.txt': '', 'c.txt': ''})
        paths = [os.path.join(self.base, name) for name in ('a.txt', 'ghost', 'c.txt')]

        results = self.ops.delete_many(paths)

        self.assertEqual([path for path, _ in results], paths)
        self.assertIsNone(results[0][1])
        self.assertIsInstance(results[1][1], DeleteError)
        self.assertIsNone(results[2][1])
        self.assertEqual(os.listdir(self.base), [])

    def test_operations_invalidate_real_lister_cache(self):
        lister = EntryLister()
        ops = FileOpsEngine(lister)
        make_tree(self.base, {'a.txt': ''})
        lister.list(self.base)

        ops.create_file(self.base, 'b.txt')

        self.assertEqual([e.name for e in lister.list(self.base)], ['a.txt', 'b.txt'])

    def test_engine_without_lister(self):
        ops = FileOpsEngine()
        path = ops.create_file(self.base, 'solo.txt')
        self.assertTrue(os.path.exists(path))


if __name__ == '__main__':
    unittest.main()
