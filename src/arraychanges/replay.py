import logging
from typing import Any, Callable, Dict, Hashable, List, MutableSequence, Optional, Sequence

from .changes import ArrayChanges
from .exceptions import DuplicateIdentityError, ReplayError
from .matcher import index_by_identity

logger = logging.getLogger(__name__)


def _check_fits(changes: ArrayChanges, items: Sequence[Any], new_items: Sequence[Any]):
    old_len, new_len = len(items), len(new_items)
    if old_len - len(changes.removals) + len(changes.insertions) != new_len:
        raise ReplayError(
            f"Changes do not fit: {old_len} items - {len(changes.removals)} removals "
            f"+ {len(changes.insertions)} insertions != {new_len} new items"
        )
    removed = set()
    for r in changes.removals:
        if not 0 <= r.index < old_len or r.index in removed:
            raise ReplayError(f"Removal index {r.index} is out of range or repeated")
        removed.add(r.index)
    for u in changes.updates:
        if not (0 <= u.old_index < old_len and 0 <= u.new_index < new_len):
            raise ReplayError(f"Update {u} is out of range")
    intermediate_len = old_len - len(changes.removals)
    for m in changes.moves:
        if not (0 <= m.intermediate_source_index < intermediate_len
                and 0 <= m.intermediate_target_index < intermediate_len):
            raise ReplayError(f"Move {m} is out of range")
    for rank, i in enumerate(sorted(c.index for c in changes.insertions)):
        if not 0 <= i <= intermediate_len + rank:
            raise ReplayError(f"Insertion index {i} is out of range")


def apply_to_list(
    changes: ArrayChanges,
    items: MutableSequence[Any],
    new_items: Sequence[Any],
    make_item: Callable[[Any], Any],
    on_update: Optional[Callable[[Any, Any], None]] = None,
    on_remove: Optional[Callable[[Any], None]] = None,
) -> None:
    """Replay `changes` on `items`, the old list the changes were found for.

    After the call `items` corresponds to `new_items` element by element.
    Matched items stay the same objects: `on_update` is called for the ones
    whose contents changed, `make_item` creates items for the insertions and
    `on_remove` is called for every removed item while it is still in the list.
    """
    _check_fits(changes, items, new_items)
    logger.debug("Replaying %s on a list of %d items", changes, len(items))

    updated = [(items[u.old_index], new_items[u.new_index]) for u in changes.updates]

    for r in sorted(changes.removals, key=lambda r: r.index, reverse=True):
        if on_remove is not None:
            on_remove(items[r.index])
        del items[r.index]

    if on_update is not None:
        for old_item, new_item in updated:
            on_update(old_item, new_item)

    # Moves are relative to the current state of the list, so their order matters.
    for m in changes.moves:
        item = items[m.intermediate_source_index]
        del items[m.intermediate_source_index]
        items.insert(m.intermediate_target_index, item)

    for i in sorted(changes.insertions, key=lambda i: i.index):
        items.insert(i.index, make_item(new_items[i.index]))


def _items_by_identity(items: Sequence[Any], item_id: Callable[[Any], Hashable]) -> Dict[Hashable, Any]:
    by_id: Dict[Hashable, Any] = {}
    positions: Dict[Hashable, int] = {}
    for i, item in enumerate(items):
        identity = item_id(item)
        if identity in by_id:
            raise DuplicateIdentityError('old', identity, positions[identity], i)
        by_id[identity] = item
        positions[identity] = i
    return by_id


def compact_diff_update(
    items: MutableSequence[Any],
    item_id: Callable[[Any], Hashable],
    new_items: Sequence[Any],
    new_id: Callable[[Any], Hashable],
    make_item: Callable[[Any], Optional[Any]],
    update: Optional[Callable[[Any, Any], Optional[bool]]] = None,
    remove: Optional[Callable[[Any], None]] = None,
) -> bool:
    """Like `diff_update`, but `make_item` can return None to skip a source item.

    This is for sources that may contain incomplete items which can be picked
    up by a later call.
    """
    by_id = _items_by_identity(items, item_id)
    # Both sides are validated before any callback can touch the caller's items.
    new_ids = [new_id(source) for source in new_items]
    index_by_identity(new_ids, 'new')
    changed = False
    result: List[Any] = []
    for identity, source in zip(new_ids, new_items):
        if identity in by_id:
            item = by_id.pop(identity)
            if update is not None and update(item, source):
                changed = True
            result.append(item)
        else:
            item = make_item(source)
            if item is not None:
                changed = True
                result.append(item)

    if by_id:
        changed = True

    if not changed:
        # No additions or removals, but the order could still be different.
        changed = any(item_id(a) != item_id(b) for a, b in zip(items, result))

    if changed:
        items[:] = result
        if remove is not None:
            for item in by_id.values():
                remove(item)
    return changed


def diff_update(
    items: MutableSequence[Any],
    item_id: Callable[[Any], Hashable],
    new_items: Sequence[Any],
    new_id: Callable[[Any], Hashable],
    make_item: Callable[[Any], Any],
    update: Optional[Callable[[Any, Any], Optional[bool]]] = None,
    remove: Optional[Callable[[Any], None]] = None,
) -> bool:
    """Update `items` in place so it mirrors `new_items`.

    Works like `items[:] = [make_item(x) for x in new_items]`, except that
    items already present (by identity) are kept and passed to `update`
    instead of being recreated. `update` can return True to count a change in
    an existing item. Items without a counterpart are passed to `remove`.

    Returns True if anything was added, removed, reordered or reported as
    updated.
    """
    return compact_diff_update(items, item_id, new_items, new_id, make_item, update, remove)


def diff_map(
    items: Sequence[Any],
    item_id: Callable[[Any], Hashable],
    new_items: Sequence[Any],
    new_id: Callable[[Any], Hashable],
    make_item: Callable[[Any], Any],
    update: Optional[Callable[[Any, Any], Optional[bool]]] = None,
    remove: Optional[Callable[[Any], None]] = None,
) -> List[Any]:
    result = list(items)
    diff_update(result, item_id, new_items, new_id, make_item, update, remove)
    return result
