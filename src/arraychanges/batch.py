"""Replaying changes on an incremental list view.

A list view (think of a table widget animating its rows) cannot reload and move
the same row within one batch of updates. So removals, insertions and moves go
into one batch, while content updates of rows that did not move are returned to
the caller, who can reload them separately (or let the rows refresh themselves).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .changes import ArrayChanges, updates_without_moves

logger = logging.getLogger(__name__)


class BatchUpdateTarget(ABC):
    @abstractmethod
    def begin_updates(self):
        pass

    @abstractmethod
    def end_updates(self):
        pass

    @abstractmethod
    def delete_rows(self, handles: Sequence[Any], style: Any):
        pass

    @abstractmethod
    def insert_rows(self, handles: Sequence[Any], style: Any):
        pass

    @abstractmethod
    def move_row(self, source: Any, target: Any):
        pass

    @abstractmethod
    def reload_rows(self, handles: Sequence[Any], style: Any):
        pass


class RecordingBatchTarget(BatchUpdateTarget):
    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []

    def begin_updates(self):
        self.calls.append(("begin_updates", ()))

    def end_updates(self):
        self.calls.append(("end_updates", ()))

    def delete_rows(self, handles: Sequence[Any], style: Any):
        self.calls.append(("delete_rows", (list(handles), style)))

    def insert_rows(self, handles: Sequence[Any], style: Any):
        self.calls.append(("insert_rows", (list(handles), style)))

    def move_row(self, source: Any, target: Any):
        self.calls.append(("move_row", (source, target)))

    def reload_rows(self, handles: Sequence[Any], style: Any):
        self.calls.append(("reload_rows", (list(handles), style)))

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]


def apply_to_batch_target(
    changes: ArrayChanges,
    target: BatchUpdateTarget,
    handle_for_index: Callable[[int], Any],
    removal_style: Any,
    insertion_style: Any,
    reload_style: Optional[Any] = None,
) -> List[Any]:
    """Replay `changes` on `target` as a single batch.

    `handle_for_index` maps a row index, old or new depending on the kind of
    change, to whatever position object the target understands; it can only
    shift rows or pick a section.

    Returns handles (by new index) of updated rows that did not move. When
    `reload_style` is given they are also reloaded in a second batch.

    A row counts as not moved when no `Move` targets its new index, not only
    when its old and new indexes are equal: a removal or insertion above a
    row shifts its index without moving it, and the row still needs a reload.
    """
    if changes.is_empty:
        return []

    target.begin_updates()
    target.delete_rows([handle_for_index(r.index) for r in changes.removals], removal_style)
    target.insert_rows([handle_for_index(i.index) for i in changes.insertions], insertion_style)
    for m in changes.moves:
        target.move_row(handle_for_index(m.old_index), handle_for_index(m.new_index))
    target.end_updates()

    reload_handles = [handle_for_index(u.new_index) for u in updates_without_moves(changes)]
    if reload_style is not None and reload_handles:
        logger.debug("Reloading %d updated rows", len(reload_handles))
        target.begin_updates()
        target.reload_rows(reload_handles, reload_style)
        target.end_updates()
    return reload_handles
