'''Program blocks and the fixed connector topology each one carries'''

__author__ = 'BlockLink Developers'

from typing import (
    Any,
    ClassVar,
    Hashable,
    Iterable,
    Optional,
)

from .connection import Connector, ConnectorKind, BlockID


class Block:
    '''
    A program node in the editor, with a fixed arrangement of Connectors

    Parameters
    ----------
    block_id : Hashable
        Stable identity of the block, by which the workspace registry keys it
    label : Optional[str]
        Display name of the block
    leading : Optional[Connector]
        The block's single outgoing connector, which must be either a PLUG or a BEFORE connector
        Holding both in one field makes a block with a plug AND a before-connector unrepresentable
    sockets : Optional[Iterable[Connector]]
        Ordinary SOCKET connectors, in display order
    after : Optional[Connector]
        The AFTER connector at which a following block in a sequence attaches, if any
    metadata : dict[Hashable, Any]
        Any other information the user may want to bind to this Block
    '''
    DEFAULT_LABEL : ClassVar[str] = 'Block'

    def __init__(
        self,
        block_id : BlockID,
        label : Optional[str]=None,
        leading : Optional[Connector]=None,
        sockets : Optional[Iterable[Connector]]=None,
        after : Optional[Connector]=None,
        metadata : Optional[dict[Hashable, Any]]=None,
    ) -> None:
        if not isinstance(block_id, Hashable):
            raise TypeError(f'Block identity must be a Hashable type, not {type(block_id)}')
        self._block_id = block_id
        self.label = type(self).DEFAULT_LABEL if (label is None) else label
        self.metadata = metadata or dict()

        if (leading is not None) and not leading.kind.is_plug_equivalent:
            raise ValueError(f'Leading connector must be a plug or before-connector, not {leading.kind.value!r}')
        self._leading = leading

        self._sockets : tuple[Connector, ...] = tuple(sockets) if (sockets is not None) else tuple()
        for socket in self._sockets:
            if socket.kind != ConnectorKind.SOCKET:
                raise ValueError(f'Expected only socket connectors among sockets, found {socket.kind.value!r} connector')

        if (after is not None) and (after.kind != ConnectorKind.AFTER):
            raise ValueError(f'After-connector must be of kind "after", not {after.kind.value!r}')
        self._after = after

        for connector in self.connectors:
            connector._bind_to(self._block_id)

    # Identity
    @property
    def block_id(self) -> BlockID:
        '''Stable identity of this Block'''
        return self._block_id

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._block_id == other._block_id

    def __hash__(self) -> int:
        return hash(self._block_id)

    # Connector access
    @property
    def leading(self) -> Optional[Connector]:
        '''The single outgoing connector of this Block (either a plug or a before-connector), if any'''
        return self._leading

    @property
    def has_plug(self) -> bool:
        return (self._leading is not None) and (self._leading.kind == ConnectorKind.PLUG)

    @property
    def plug(self) -> Optional[Connector]:
        return self._leading if self.has_plug else None

    @property
    def has_before_connector(self) -> bool:
        return (self._leading is not None) and (self._leading.kind == ConnectorKind.BEFORE)

    @property
    def before_connector(self) -> Optional[Connector]:
        return self._leading if self.has_before_connector else None

    @property
    def has_after_connector(self) -> bool:
        return self._after is not None

    @property
    def after_connector(self) -> Optional[Connector]:
        return self._after

    @property
    def sockets(self) -> tuple[Connector, ...]:
        '''Ordinary sockets of this Block, in display order'''
        return self._sockets

    @property
    def connectors(self) -> tuple[Connector, ...]:
        '''Every Connector on this Block: the leading connector, then sockets, then the after-connector'''
        connectors = list(self._sockets)
        if self._leading is not None:
            connectors.insert(0, self._leading)
        if self._after is not None:
            connectors.append(self._after)

        return tuple(connectors)

    def owns(self, connector : Connector) -> bool:
        '''Whether the given Connector is one of this Block's own'''
        return any(connector is own for own in self.connectors)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(block_id={self.block_id!r}, label={self.label!r}, num_connectors={len(self.connectors)})'
