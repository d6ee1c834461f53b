from arraychanges.changes import (
    ArrayChanges, Removal, Insertion, Move, Update,
    count_changes, updates_without_moves, changes_from_tuples
)
from arraychanges.matcher import (
    ArrayChangesMatcher, find_changes, find_changes_hashable, find_changes_by_object,
    longest_increasing_subsequence
)
from arraychanges.replay import apply_to_list, diff_update, compact_diff_update, diff_map
from arraychanges.batch import BatchUpdateTarget, RecordingBatchTarget, apply_to_batch_target
from arraychanges.exceptions import ArrayChangesError, DuplicateIdentityError, ReplayError


__version__ = "1.0.0"

__all__ = [
    "ArrayChanges", "Removal", "Insertion", "Move", "Update",
    "count_changes", "updates_without_moves", "changes_from_tuples",
    "ArrayChangesMatcher", "find_changes", "find_changes_hashable", "find_changes_by_object",
    "longest_increasing_subsequence",
    "apply_to_list", "diff_update", "compact_diff_update", "diff_map",
    "BatchUpdateTarget", "RecordingBatchTarget", "apply_to_batch_target",
    "ArrayChangesError", "DuplicateIdentityError", "ReplayError",
]
