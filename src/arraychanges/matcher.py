import logging
import operator
from bisect import bisect_left, insort
from typing import Callable, Dict, Hashable, List, Optional, Sequence, Set, Tuple, TypeVar

from .changes import ArrayChanges, Insertion, Move, Removal, Update
from .exceptions import DuplicateIdentityError

logger = logging.getLogger(__name__)

OldItem = TypeVar('OldItem')
NewItem = TypeVar('NewItem')

IdFunc = Callable[[object], Hashable]
EqualFunc = Callable[[object, object], bool]
MatchedPair = Tuple[int, int]


def longest_increasing_subsequence(values: Sequence[int]) -> List[int]:
    """Positions in `values` of a longest strictly increasing subsequence.

    Patience sorting: `tails[k]` is the smallest value ending an increasing
    run of length k + 1 seen so far, `parents` links every position to the
    previous one of the best run ending there.
    """
    tails: List[int] = []
    tail_positions: List[int] = []
    parents: List[int] = [-1] * len(values)
    for pos, value in enumerate(values):
        slot = bisect_left(tails, value)
        if slot > 0:
            parents[pos] = tail_positions[slot - 1]
        if slot == len(tails):
            tails.append(value)
            tail_positions.append(pos)
        else:
            tails[slot] = value
            tail_positions[slot] = pos
    result: List[int] = []
    pos = tail_positions[-1] if tail_positions else -1
    while pos != -1:
        result.append(pos)
        pos = parents[pos]
    result.reverse()
    return result


def index_by_identity(identities: Sequence[Hashable], sequence: str) -> Dict[Hashable, int]:
    index: Dict[Hashable, int] = {}
    for i, identity in enumerate(identities):
        first = index.setdefault(identity, i)
        if first != i:
            raise DuplicateIdentityError(sequence, identity, first, i)
    return index


class ArrayChangesMatcher:
    def __init__(
        self,
        old_items: Sequence[OldItem],
        old_id: IdFunc,
        new_items: Sequence[NewItem],
        new_id: IdFunc,
        is_equal: Optional[EqualFunc] = None,
    ):
        self.old_items = old_items
        self.old_id = old_id
        self.new_items = new_items
        self.new_id = new_id
        self.is_equal = is_equal

    def compute(self) -> ArrayChanges:
        old_ids = [self.old_id(item) for item in self.old_items]
        new_ids = [self.new_id(item) for item in self.new_items]
        old_index = index_by_identity(old_ids, 'old')
        new_index = index_by_identity(new_ids, 'new')
        logger.debug("Matching %d old items against %d new items", len(old_ids), len(new_ids))

        if old_ids == new_ids:
            # Nothing moved, added or removed; only contents may differ.
            updates = self._updates([(i, i) for i in range(len(old_ids))])
            if not updates:
                return ArrayChanges.EMPTY
            return ArrayChanges(updates=updates)

        removals = [Removal(i) for i, identity in enumerate(old_ids) if identity not in new_index]
        insertions = [Insertion(j) for j, identity in enumerate(new_ids) if identity not in old_index]
        pairs = [(i, new_index[identity]) for i, identity in enumerate(old_ids) if identity in new_index]

        stationary = set(longest_increasing_subsequence([j for _, j in pairs]))
        moves = self._moves(pairs, stationary)
        updates = self._updates(sorted(pairs, key=lambda pair: pair[1]))

        logger.debug(
            "Found %d removals, %d insertions, %d moves, %d updates",
            len(removals), len(insertions), len(moves), len(updates),
        )
        return ArrayChanges(removals=removals, insertions=insertions, moves=moves, updates=updates)

    def _moves(self, pairs: List[MatchedPair], stationary: Set[int]) -> List[Move]:
        """Moves with their intermediate indexes, ascending by old index.

        Every move looks up, deletes and reinserts in a plain list of the k
        matched items, so this step is O(k) per move and O(k * moves) overall,
        O(k^2) for a reversed list. Classifying the moves stays O(k log k).
        """
        # The intermediate list starts as the old one without removed items and is
        # identified by new indexes; it ends up ordered by them after the last move.
        intermediate = [j for _, j in pairs]
        placed = sorted(pairs[pos][1] for pos in stationary)
        moves = []
        for pos, (old_index, new_index) in enumerate(pairs):
            if pos in stationary:
                continue
            source = intermediate.index(new_index)
            del intermediate[source]
            # Right after the placed item preceding it in the new list.
            slot = bisect_left(placed, new_index)
            target = intermediate.index(placed[slot - 1]) + 1 if slot > 0 else 0
            intermediate.insert(target, new_index)
            insort(placed, new_index)
            moves.append(Move(old_index, new_index, source, target))
        return moves

    def _updates(self, pairs: List[MatchedPair]) -> List[Update]:
        if self.is_equal is None:
            return []
        return [
            Update(old_index, new_index)
            for old_index, new_index in pairs
            if not self.is_equal(self.old_items[old_index], self.new_items[new_index])
        ]


def find_changes(
    old_items: Sequence[OldItem],
    old_id: IdFunc,
    new_items: Sequence[NewItem],
    new_id: IdFunc,
    is_equal: Optional[EqualFunc] = None,
) -> ArrayChanges:
    """Find list view compatible changes between two lists.

    `old_id` and `new_id` give every item an identity, identities of old and
    new items must be comparable and unique within each list. `is_equal` is
    called for items sharing an identity; when it returns false the pair is
    reported as an update. Without it contents are assumed to never change.

    Raises `DuplicateIdentityError` if an identity repeats within a list.
    """
    return ArrayChangesMatcher(old_items, old_id, new_items, new_id, is_equal).compute()


def _identity(item):
    return item


def find_changes_hashable(old_items: Sequence[Hashable], new_items: Sequence[Hashable]) -> ArrayChanges:
    # Items are their own identities.
    return find_changes(old_items, _identity, new_items, _identity, operator.eq)


def find_changes_by_object(
    old_items: Sequence[object],
    new_items: Sequence[object],
    is_equal: Optional[EqualFunc] = None,
) -> ArrayChanges:
    return find_changes(old_items, id, new_items, id, is_equal)
