'''Abstractions of the connectors through which blocks join one another'''

__author__ = 'BlockLink Developers'

from typing import (
    Any,
    ClassVar,
    Hashable,
    Optional,
    TypeVar,
    Union,
)
from enum import Enum


# Label typehints
ConnectorLabel = TypeVar('ConnectorLabel', bound=Hashable)
BlockID = TypeVar('BlockID', bound=Hashable)
DataType = Hashable # tag compared by rules to decide whether two connectors carry compatible data

# Custom Exceptions
class BlockLinkError(Exception):
    '''Base for all errors raised while checking or realizing links between blocks'''
    pass

class IncompatibleConnectorError(BlockLinkError):
    '''Raised when attempting to join two Connectors which are, for whatever reason, incompatible'''
    pass

class ConnectorOwnershipError(BlockLinkError, ValueError):
    '''Raised when a Connector is claimed by more than one block'''
    pass

class PlugExclusivityError(BlockLinkError, AssertionError):
    '''Raised when a block exposes both a plug and a before-connector (at most one is permitted)'''
    pass

class LinkStateError(BlockLinkError):
    '''Raised when connecting an already-connected link, or disconnecting one which was never connected'''
    pass

# Helper classes
class ConnectorKind(Enum):
    '''
    The role a Connector plays on its block

    PLUG and BEFORE are "plug-equivalent" (outgoing, at most one per block);
    SOCKET and AFTER are "socket-equivalent" (incoming)
    '''
    PLUG = 'plug'
    BEFORE = 'before'
    SOCKET = 'socket'
    AFTER = 'after'

    @property
    def is_plug_equivalent(self) -> bool:
        '''Whether connectors of this kind lead out from their block'''
        return self in (ConnectorKind.PLUG, ConnectorKind.BEFORE)

    @property
    def is_socket_equivalent(self) -> bool:
        '''Whether connectors of this kind accept other blocks'''
        return not self.is_plug_equivalent

    @classmethod
    def complement(cls, kind : 'ConnectorKind') -> 'ConnectorKind':
        '''
        Get the kind of connector that a connector of the given kind joins onto

        Parameters
        ----------
        kind : ConnectorKind
            The kind to get the complement of

        Returns
        -------
        ConnectorKind
            The complement of the given kind
        '''
        if kind == cls.PLUG:
            return cls.SOCKET
        elif kind == cls.SOCKET:
            return cls.PLUG
        elif kind == cls.BEFORE:
            return cls.AFTER
        elif kind == cls.AFTER:
            return cls.BEFORE

# Connector class proper
class Connector:
    '''
    A single point on a block through which it may join another block

    Connectors are compared by identity; two Connectors with identical attributes are still distinct.
    A Connector does not know where it sits on screen - that is the business of the block's view
    '''
    DEFAULT_LABEL : ClassVar[ConnectorLabel] = 'Conn'

    def __init__(
        self,
        kind : Union[ConnectorKind, str],
        data_type : Optional[DataType]=None,
        label : Optional[ConnectorLabel]=None,
        metadata : Optional[dict[Hashable, Any]]=None,
    ) -> None:
        self.kind = ConnectorKind(kind)
        self.data_type = data_type
        self.label = self.__class__.DEFAULT_LABEL if (label is None) else label
        self.metadata = metadata or dict()

        self._block_id : Optional[BlockID] = None # DEV: no setter; assigned once by the owning Block
        self.linked_block_id : Optional[BlockID] = None

    # Ownership
    @property
    def block_id(self) -> Optional[BlockID]:
        '''Identity of the block this Connector belongs to (None until claimed by a block)'''
        return self._block_id

    def _bind_to(self, block_id : BlockID) -> None:
        '''Claim this Connector for the block with the given identity'''
        if (self._block_id is not None) and (self._block_id != block_id):
            raise ConnectorOwnershipError(f'{self!r} already belongs to block {self._block_id!r}; cannot also belong to block {block_id!r}')
        self._block_id = block_id

    # Link state
    @property
    def is_linked(self) -> bool:
        '''Whether some other block is currently joined at this Connector'''
        return self.linked_block_id is not None

    # Comparison methods
    def kind_complements(self, other : 'Connector') -> bool:
        '''Whether the kind of this Connector is the one the other Connector joins onto (plug-socket or before-after)'''
        return other.kind == ConnectorKind.complement(self.kind)

    def type_matches(self, other : 'Connector') -> bool:
        '''Whether this Connector carries the same data type tag as another Connector'''
        return self.data_type == other.data_type

    ## Labelling and representation methods
    @property
    def label(self) -> ConnectorLabel:
        '''Identifying label for this Connector'''
        return self._label

    @label.setter
    def label(self, new_label : ConnectorLabel) -> None:
        if not isinstance(new_label, Hashable):
            raise TypeError(f'Connector label must be a Hashable type, not {type(new_label)}')
        self._label = new_label

    def __repr__(self) -> str:
        repr_attr_strs : dict[str, Any] = {
            'kind' : self.kind.value,
            'data_type' : self.data_type,
            'label' : self.label,
            'block_id' : self.block_id,
        }
        attr_str = ', '.join(
            f'{attr}={value!r}'
                for (attr, value) in repr_attr_strs.items()
        )

        return f'{self.__class__.__name__}({attr_str})'
