from dataclasses import dataclass
from typing import ClassVar, Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Removal:
    # Index of the removed item in the *old* list.
    index: int

    def __str__(self) -> str:
        return f"-{self.index}"

    def to_dict(self) -> dict:
        return {"type": "removal", "index": self.index}


@dataclass(frozen=True)
class Insertion:
    # Index of the inserted item in the *new* list.
    index: int

    def __str__(self) -> str:
        return f"+{self.index}"

    def to_dict(self) -> dict:
        return {"type": "insertion", "index": self.index}


@dataclass(frozen=True)
class Move:
    """An item changing its position relative to the other matched items.

    `old_index` and `new_index` are positions in the old and new lists, this is
    what a list view expects. The intermediate pair is what a plain list needs:
    both are positions in the old list with all the removals applied together
    with the moves emitted before this one, but no insertions yet.
    """

    old_index: int
    new_index: int
    intermediate_source_index: int
    intermediate_target_index: int

    def __str__(self) -> str:
        return f"{self.old_index} -> {self.new_index}"

    def to_dict(self) -> dict:
        return {
            "type": "move",
            "old_index": self.old_index,
            "new_index": self.new_index,
            "intermediate_source_index": self.intermediate_source_index,
            "intermediate_target_index": self.intermediate_target_index,
        }


@dataclass(frozen=True)
class Update:
    # A matched item whose contents changed, possibly moved as well.
    old_index: int
    new_index: int

    def __str__(self) -> str:
        return f"{self.old_index} -> *{self.new_index}"

    def to_dict(self) -> dict:
        return {"type": "update", "old_index": self.old_index, "new_index": self.new_index}


@dataclass(frozen=True)
class ArrayChanges:
    """Differences between two lists of identifiable items.

    Removals are ascending by old index, insertions ascending by new index,
    moves ascending by old index (the order their intermediate indexes assume)
    and updates ascending by new index.
    """

    removals: Tuple[Removal, ...] = ()
    insertions: Tuple[Insertion, ...] = ()
    moves: Tuple[Move, ...] = ()
    updates: Tuple[Update, ...] = ()

    EMPTY: ClassVar['ArrayChanges']

    def __post_init__(self):
        object.__setattr__(self, 'removals', tuple(self.removals))
        object.__setattr__(self, 'insertions', tuple(self.insertions))
        object.__setattr__(self, 'moves', tuple(self.moves))
        object.__setattr__(self, 'updates', tuple(self.updates))

    @property
    def is_empty(self) -> bool:
        return not (self.removals or self.insertions or self.moves or self.updates)

    def all_changes(self) -> List[object]:
        return [*self.removals, *self.insertions, *self.moves, *self.updates]

    def summary(self) -> Dict[str, int]:
        return count_changes(self)

    def to_dict(self) -> dict:
        return {
            "removals": [r.to_dict() for r in self.removals],
            "insertions": [i.to_dict() for i in self.insertions],
            "moves": [m.to_dict() for m in self.moves],
            "updates": [u.to_dict() for u in self.updates],
            "summary": self.summary(),
        }

    def __str__(self) -> str:
        if self.is_empty:
            return "ArrayChanges(empty)"
        return f"ArrayChanges({', '.join(str(c) for c in self.all_changes())})"


ArrayChanges.EMPTY = ArrayChanges()


def count_changes(changes: ArrayChanges) -> Dict[str, int]:
    counts = {
        'removals': len(changes.removals),
        'insertions': len(changes.insertions),
        'moves': len(changes.moves),
        'updates': len(changes.updates),
    }
    counts['total'] = sum(counts.values())
    return counts


def moved_new_indexes(changes: ArrayChanges) -> set:
    return {m.new_index for m in changes.moves}


def updates_without_moves(changes: ArrayChanges) -> List[Update]:
    moved = moved_new_indexes(changes)
    return [u for u in changes.updates if u.new_index not in moved]


def changes_from_tuples(
    removals: Iterable[int] = (),
    insertions: Iterable[int] = (),
    moves: Iterable[Tuple[int, int, int, int]] = (),
    updates: Iterable[Tuple[int, int]] = (),
) -> ArrayChanges:
    return ArrayChanges(
        removals=[Removal(i) for i in removals],
        insertions=[Insertion(i) for i in insertions],
        moves=[Move(*m) for m in moves],
        updates=[Update(*u) for u in updates],
    )
