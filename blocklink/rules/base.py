'''Generic, base contract for all link rules'''

__author__ = 'BlockLink Developers'

from typing import Callable, Optional, TypeAlias
from abc import ABC, abstractmethod

from ..blocks.block import Block
from ..blocks.connection import Connector


LinkPredicate : TypeAlias = Callable[[Block, Block, Connector, Connector], bool]

class LinkRule(ABC):
    '''
    Abstract base class for all rules deciding whether two connectors may join

    Each rule is either mandatory (it must pass for any link to be allowed, i.e. a veto)
    or advisory (among all advisory rules, at least one must pass)

    Parameters
    ----------
    mandatory : bool, default False
        Whether this rule vetoes every link it rejects
    name : Optional[str]
        Human-readable name of the rule; defaults to the name of the rule's class
    '''
    def __init__(self, mandatory : bool=False, name : Optional[str]=None) -> None:
        self.mandatory = mandatory
        self.name = type(self).__name__ if (name is None) else name

    @property
    def is_mandatory(self) -> bool:
        return self.mandatory

    @abstractmethod
    def can_link(
        self,
        block1 : Block,
        block2 : Block,
        connector1 : Connector,
        connector2 : Connector,
    ) -> bool:
        '''
        Whether connector1 (on block1) may join connector2 (on block2)
        Either connector may be the plug-equivalent one; implementations must not assume an order
        '''
        ...

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(name={self.name!r}, mandatory={self.mandatory})'

class PredicateRule(LinkRule):
    '''Wraps a plain callable over (block1, block2, connector1, connector2) as a LinkRule'''
    def __init__(
        self,
        predicate : LinkPredicate,
        mandatory : bool=False,
        name : Optional[str]=None,
    ) -> None:
        if not callable(predicate):
            raise TypeError(f'Rule predicate must be callable, not {type(predicate)}')
        super().__init__(
            mandatory=mandatory,
            name=getattr(predicate, '__name__', None) if (name is None) else name,
        )
        self.predicate = predicate

    def can_link(
        self,
        block1 : Block,
        block2 : Block,
        connector1 : Connector,
        connector2 : Connector,
    ) -> bool:
        return bool(self.predicate(block1, block2, connector1, connector2))
