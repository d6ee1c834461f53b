from helpers.naive_changes import (
    NaiveLCS,
    ChangesVerifier,
    PartitionReport,
    naive_lis_length,
    minimal_move_count,
    naive_replay,
    verify_changes,
    changes_as_tuples,
)


__all__ = [
    "NaiveLCS",
    "ChangesVerifier",
    "PartitionReport",
    "naive_lis_length",
    "minimal_move_count",
    "naive_replay",
    "verify_changes",
    "changes_as_tuples",
]
