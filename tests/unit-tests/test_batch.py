import sys, os, unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from arraychanges.batch import BatchUpdateTarget, RecordingBatchTarget, apply_to_batch_target
from arraychanges.changes import ArrayChanges, changes_from_tuples
from arraychanges.matcher import find_changes


def by_key(item):
    return item[0]


def same(old, new):
    return old == new


class RowPath:
    """Stands in for a section/row position of a table view."""

    def __init__(self, row, section=0):
        self.row = row
        self.section = section

    def __eq__(self, other):
        return isinstance(other, RowPath) and (self.row, self.section) == (other.row, other.section)

    def __repr__(self):
        return f"RowPath({self.row}, {self.section})"


class TestRecordingTarget(unittest.TestCase):
    def test_is_target(self):
        self.assertIsInstance(RecordingBatchTarget(), BatchUpdateTarget)

    def test_abstract(self):
        with self.assertRaises(TypeError):
            BatchUpdateTarget()

    def test_records_copies(self):
        target = RecordingBatchTarget()
        handles = [1, 2]
        target.delete_rows(handles, "fade")
        handles.append(3)
        self.assertEqual(target.calls, [("delete_rows", ([1, 2], "fade"))])
        self.assertEqual(target.call_names(), ["delete_rows"])


class TestApplyToBatchTarget(unittest.TestCase):
    def setUp(self):
        self.target = RecordingBatchTarget()

    def test_empty_changes_issue_nothing(self):
        result = apply_to_batch_target(ArrayChanges.EMPTY, self.target, RowPath, "fade", "fade", "none")
        self.assertEqual(result, [])
        self.assertEqual(self.target.calls, [])

    def test_single_batch(self):
        old = [("a", 1), ("b", 1), ("c", 1), ("d", 1)]
        new = [("d", 1), ("a", 1), ("x", 1), ("c", 1)]
        changes = find_changes(old, by_key, new, by_key, same)
        result = apply_to_batch_target(changes, self.target, RowPath, "left", "right")
        self.assertEqual(result, [])
        self.assertEqual(self.target.calls, [
            ("begin_updates", ()),
            ("delete_rows", ([RowPath(1)], "left")),
            ("insert_rows", ([RowPath(2)], "right")),
            ("move_row", (RowPath(3), RowPath(0))),
            ("end_updates", ()),
        ])

    def test_updates_of_unmoved_rows_returned(self):
        old = [("a", 1), ("b", 1), ("c", 1)]
        new = [("a", 2), ("c", 1), ("b", 1)]
        changes = find_changes(old, by_key, new, by_key, same)
        result = apply_to_batch_target(changes, self.target, lambda i: i, "fade", "fade")
        self.assertEqual(result, [0])
        self.assertNotIn("reload_rows", self.target.call_names())

    def test_updates_of_moved_rows_not_returned(self):
        old = [("a", 1), ("b", 1), ("c", 1)]
        new = [("c", 2), ("a", 1), ("b", 1)]
        changes = find_changes(old, by_key, new, by_key, same)
        result = apply_to_batch_target(changes, self.target, lambda i: i, "fade", "fade", "fade")
        self.assertEqual(result, [])
        self.assertEqual(self.target.call_names().count("begin_updates"), 1)

    def test_handles_use_new_indexes(self):
        old = [("x", 1), ("a", 1), ("b", 1)]
        new = [("a", 1), ("b", 2)]
        changes = find_changes(old, by_key, new, by_key, same)
        result = apply_to_batch_target(changes, self.target, RowPath, "fade", "fade")
        self.assertEqual(result, [RowPath(1)])

    def test_reload_in_second_batch(self):
        old = [("a", 1), ("b", 1)]
        new = [("a", 1), ("b", 2), ("c", 1)]
        changes = find_changes(old, by_key, new, by_key, same)
        result = apply_to_batch_target(changes, self.target, lambda i: i, "fade", "fade", "none")
        self.assertEqual(result, [1])
        self.assertEqual(self.target.call_names(), [
            "begin_updates", "delete_rows", "insert_rows", "end_updates",
            "begin_updates", "reload_rows", "end_updates",
        ])
        self.assertEqual(self.target.calls[5], ("reload_rows", ([1], "none")))

    def test_moves_use_old_and_new_indexes(self):
        changes = changes_from_tuples(moves=[(0, 2, 0, 2)])
        apply_to_batch_target(changes, self.target, lambda i: i * 10, "fade", "fade")
        self.assertIn(("move_row", (0, 20)), self.target.calls)


if __name__ == '__main__':
    unittest.main(verbosity=2)
