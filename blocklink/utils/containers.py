'''Custom data containers with useful properties'''

__author__ = 'BlockLink Developers'

from typing import (
    Generic,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)
T = TypeVar('T')


class RecencyOrderedSet(Generic[T]):
    '''
    An ordered collection in which each object appears at most once, as judged by IDENTITY (not equality)

    Re-adding an object which is already present moves it to the end of the collection,
    so that iteration order always reflects the time of each object's most recent insertion
    '''
    def __init__(self, items : Optional[Iterable[T]]=None) -> None:
        self._items : list[T] = []
        if items is not None:
            for item in items:
                self.add(item)

    # Membership
    def index(self, obj : T) -> int:
        '''Position of the given object in the collection; raises ValueError if absent'''
        for i, item in enumerate(self._items):
            if item is obj: # DEV: objects with custom __eq__ (e.g. dataclasses) must not be conflated with one another
                return i
        raise ValueError(f'{obj!r} is not present in {self.__class__.__name__}')

    def __contains__(self, obj : object) -> bool:
        return any(item is obj for item in self._items)

    # Insertion
    def add(self, obj : T) -> bool:
        '''
        Append an object to the end of the collection, removing it from its prior position if already present
        Returns whether the object was already present before the call
        '''
        was_present = self.discard(obj)
        self._items.append(obj)

        return was_present

    def insert(self, position : int, obj : T) -> bool:
        '''
        Place an object at the given position (list-style indexing), removing it from its prior position if already present
        Returns whether the object was already present before the call
        '''
        was_present = self.discard(obj)
        self._items.insert(position, obj)

        return was_present

    # Removal
    def discard(self, obj : T) -> bool:
        '''Remove an object if present, returning whether anything was removed'''
        try:
            del self._items[self.index(obj)]
        except ValueError:
            return False
        return True

    def remove(self, obj : T) -> None:
        '''Remove an object, raising KeyError if it is not present'''
        if not self.discard(obj):
            raise KeyError(obj)

    # Access
    def __getitem__(self, position : int) -> T:
        return self._items[position]

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items)) # iterate over a snapshot, so that mutation mid-iteration is harmless

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._items!r})'

    # Copying
    def copy(self) -> 'RecencyOrderedSet[T]':
        '''Shallow copy of this collection; contained objects are shared, but ordering state is not'''
        return self.__class__(self._items)
