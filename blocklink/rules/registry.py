'''Ordered registry of the rules consulted when checking links'''

__author__ = 'BlockLink Developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Iterable, Iterator, Optional
from dataclasses import dataclass

from .base import LinkRule
from ..blocks.connection import BlockLinkError
from ..utils.containers import RecencyOrderedSet
from ..workspace.events import WorkspaceListener


class MissingRuleError(BlockLinkError, KeyError):
    '''Raised when removing (or looking up) a rule which was never registered'''
    pass

@dataclass(frozen=True)
class RuleEntry:
    '''
    A registered rule, together with an observer handle onto that same rule
    if (and only if) the rule also reacts to workspace events
    '''
    rule : LinkRule
    listener : Optional[WorkspaceListener] = None

    @property
    def observes_workspace(self) -> bool:
        return self.listener is not None

    @classmethod
    def for_rule(cls, rule : LinkRule) -> 'RuleEntry':
        '''Inspect a rule's capabilities once, at registration time'''
        return cls(
            rule=rule,
            listener=rule if isinstance(rule, WorkspaceListener) else None,
        )

class RuleRegistry:
    '''
    The ordered collection of LinkRules in force

    Each rule appears at most once (as judged by identity); re-registering a rule
    moves it to the end, so order always reflects each rule's most recent registration
    '''
    def __init__(self, rules : Optional[Iterable[LinkRule]]=None) -> None:
        self._rules : RecencyOrderedSet[LinkRule] = RecencyOrderedSet()
        self._entries : dict[int, RuleEntry] = dict() # keyed by id() of rule, since rules are unique by identity
        if rules is not None:
            for rule in rules:
                self.add_rule(rule)

    # Registration
    def _register(self, rule : LinkRule) -> RuleEntry:
        if not isinstance(rule, LinkRule):
            raise TypeError(f'Only LinkRule instances can be registered, not {type(rule)}')
        entry = self._entries.get(id(rule))
        if entry is None:
            entry = self._entries[id(rule)] = RuleEntry.for_rule(rule)

        return entry

    def add_rule(self, rule : LinkRule) -> RuleEntry:
        '''Append a rule to the end of the registry, moving it there if it was already registered'''
        entry = self._register(rule)
        was_present = self._rules.add(rule)
        LOGGER.info(f'{"Moved" if was_present else "Added"} {rule!r} to end of rule registry')

        return entry

    def insert_rule(self, position : int, rule : LinkRule) -> RuleEntry:
        '''Place a rule at the given position in the registry, moving it there if it was already registered'''
        entry = self._register(rule)
        was_present = self._rules.insert(position, rule)
        LOGGER.info(f'{"Moved" if was_present else "Inserted"} {rule!r} to position {position} of rule registry')

        return entry

    def remove_rule(self, rule : LinkRule) -> RuleEntry:
        '''Remove a rule from the registry, returning its entry'''
        if rule not in self._rules:
            raise MissingRuleError(f'{rule!r} is not registered')
        self._rules.remove(rule)
        LOGGER.info(f'Removed {rule!r} from rule registry')

        return self._entries.pop(id(rule))

    # Access
    @property
    def entries(self) -> list[RuleEntry]:
        '''Entries for all registered rules, in registry order'''
        return [self._entries[id(rule)] for rule in self._rules]

    def __iter__(self) -> Iterator[LinkRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule : object) -> bool:
        return rule in self._rules

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(num_rules={len(self)}, rules={list(self._rules)!r})'
