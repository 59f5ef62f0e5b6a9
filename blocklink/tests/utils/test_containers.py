'''Unit tests for containers module'''

__author__ = 'BlockLink Developers'

import pytest

from dataclasses import dataclass

from blocklink.utils.containers import RecencyOrderedSet


@dataclass
class DummyItem:
    name : str = 'x'

# insertion tests
def test_recency_set_add() -> None:
    '''Test that added items are kept in insertion order'''
    a, b, c = DummyItem('a'), DummyItem('b'), DummyItem('c')
    items = RecencyOrderedSet([a, b, c])

    assert list(items) == [a, b, c]

def test_recency_set_readd_moves_to_end() -> None:
    '''Test that re-adding an item moves it to the end without duplicating it'''
    a, b, c = DummyItem('a'), DummyItem('b'), DummyItem('c')
    items = RecencyOrderedSet([a, b, c])
    was_present = items.add(a)

    assert was_present and (list(items) == [b, c, a]) and (len(items) == 3)

def test_recency_set_size_stable() -> None:
    '''Test that repeatedly re-adding the same item never changes the size of the collection'''
    a, b = DummyItem('a'), DummyItem('b')
    items = RecencyOrderedSet([a, b])
    for _ in range(5):
        items.add(b)
        items.add(a)

    assert len(items) == 2

def test_recency_set_identity_not_equality() -> None:
    '''Test that distinct-but-equal items are both kept'''
    a1, a2 = DummyItem('a'), DummyItem('a')
    assert a1 == a2 # sanity check on the premise of the test

    items = RecencyOrderedSet([a1, a2])
    assert (len(items) == 2) and (items.index(a2) == 1)

def test_recency_set_insert() -> None:
    '''Test that inserting an item already present relocates it to the requested position'''
    a, b, c = DummyItem('a'), DummyItem('b'), DummyItem('c')
    items = RecencyOrderedSet([a, b, c])
    items.insert(0, c)

    assert list(items) == [c, a, b]

# removal tests
def test_recency_set_discard() -> None:
    '''Test that discarding reports whether anything was removed'''
    a, b = DummyItem('a'), DummyItem('b')
    items = RecencyOrderedSet([a])

    assert items.discard(a) and not items.discard(b) and (len(items) == 0)

def test_recency_set_remove_absent() -> None:
    '''Test that removing an absent item raises KeyError'''
    items = RecencyOrderedSet()
    with pytest.raises(KeyError):
        items.remove(DummyItem())

def test_recency_set_mutation_during_iteration() -> None:
    '''Test that the collection can be modified while being iterated over'''
    a, b = DummyItem('a'), DummyItem('b')
    items = RecencyOrderedSet([a, b])
    seen = []
    for item in items:
        seen.append(item)
        items.discard(b)

    assert (seen == [a, b]) and (list(items) == [a])

# copying tests
def test_recency_set_copy_indep() -> None:
    '''Test that the ordering of a copy is independent of that of the original'''
    a, b = DummyItem('a'), DummyItem('b')
    items = RecencyOrderedSet([a, b])
    copied = items.copy()
    items.add(a)

    assert (list(copied) == [a, b]) and (list(items) == [b, a])
