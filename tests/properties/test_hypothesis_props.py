import os
import sys

from hypothesis import given
import hypothesis.strategies as hs

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from arraychanges.matcher import find_changes, find_changes_hashable
from arraychanges.replay import apply_to_list
from helpers.naive_changes import minimal_move_count, naive_replay

unique_lists = hs.lists(hs.sampled_from("abcdefghij"), unique=True)


def recover_prop(old, new):
    changes = find_changes_hashable(old, new)
    items = list(old)
    apply_to_list(changes, items, new, make_item=lambda x: x)
    assert items == new
    assert naive_replay(changes, old, new) == new
    assert len(changes.moves) == minimal_move_count(old, new)


examples = ["", "a", "ab", "ba", "abc", "cab", "bca", "acb", "dcba", "ebxad"]
examples = [list(x) for x in examples]


def test_prop_explicit():
    for x in examples:
        for y in examples:
            recover_prop(x, y)


@given(unique_lists, unique_lists)
def test_prop_chars(old, new):
    recover_prop(old, new)


@given(hs.permutations(list(range(12))))
def test_prop_permutation(new):
    old = list(range(12))
    changes = find_changes_hashable(old, new)
    assert not changes.removals and not changes.insertions
    items = list(old)
    apply_to_list(changes, items, new, make_item=lambda x: x)
    assert items == new


@given(hs.dictionaries(hs.sampled_from("abcdefgh"), hs.integers(0, 2)),
       hs.dictionaries(hs.sampled_from("abcdefgh"), hs.integers(0, 2)))
def test_prop_updates(old, new):
    old_items = list(old.items())
    new_items = list(new.items())
    changes = find_changes(old_items, lambda t: t[0], new_items, lambda t: t[0],
                           lambda o, n: o[1] == n[1])
    expected = [j for j, (k, v) in enumerate(new_items) if k in old and old[k] != v]
    assert [u.new_index for u in changes.updates] == expected
    for u in changes.updates:
        assert old_items[u.old_index][0] == new_items[u.new_index][0]
