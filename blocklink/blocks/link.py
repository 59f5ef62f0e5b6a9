'''Approved connections between the connectors of two blocks, and the factories which produce them'''

__author__ = 'BlockLink Developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Optional, Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

from .block import Block
from .connection import (
    BlockID,
    Connector,
    IncompatibleConnectorError,
    LinkStateError,
)

if TYPE_CHECKING:
    from ..workspace.workspace import Workspace


class BlockLink:
    '''
    A rule-approved pairing of a plug-equivalent Connector on one block with a socket-equivalent Connector on another

    The blocks and connectors are kept in the order they were passed (block1/connector1, block2/connector2),
    and are additionally exposed by role (plug side, socket side) irrespective of that order.
    A BlockLink is merely a proposal until connect() is called on it
    '''
    def __init__(
        self,
        block1 : Block,
        block2 : Block,
        connector1 : Connector,
        connector2 : Connector,
        workspace : Optional['Workspace']=None,
    ) -> None:
        for block, connector in ((block1, connector1), (block2, connector2)):
            if not block.owns(connector):
                raise IncompatibleConnectorError(f'{connector!r} does not belong to {block!r}')

        if connector1.kind.is_plug_equivalent and connector2.kind.is_socket_equivalent:
            self._plug_side, self._socket_side = (block1, connector1), (block2, connector2)
        elif connector2.kind.is_plug_equivalent and connector1.kind.is_socket_equivalent:
            self._plug_side, self._socket_side = (block2, connector2), (block1, connector1)
        else:
            raise IncompatibleConnectorError(
                f'A link must join one plug-equivalent and one socket-equivalent connector, not {connector1.kind.value!r} and {connector2.kind.value!r}'
            )

        self.block1 = block1
        self.block2 = block2
        self.connector1 = connector1
        self.connector2 = connector2
        self.workspace = workspace
        self._connected : bool = False

    # Role-based access
    @property
    def plug_block(self) -> Block:
        return self._plug_side[0]

    @property
    def plug(self) -> Connector:
        return self._plug_side[1]

    @property
    def plug_block_id(self) -> BlockID:
        return self.plug_block.block_id

    @property
    def socket_block(self) -> Block:
        return self._socket_side[0]

    @property
    def socket(self) -> Connector:
        return self._socket_side[1]

    @property
    def socket_block_id(self) -> BlockID:
        return self.socket_block.block_id

    # Realizing the link
    @property
    def is_connected(self) -> bool:
        '''Whether this link has been realized (and not since undone)'''
        return self._connected

    def connect(self) -> None:
        '''Join the two connectors to one another, announcing the new link to the workspace (if any)'''
        if self._connected:
            raise LinkStateError(f'{self!r} is already connected')

        self.plug.linked_block_id = self.socket_block_id
        self.socket.linked_block_id = self.plug_block_id
        self._connected = True
        LOGGER.info(f'Connected {self.plug.label!r} of block {self.plug_block_id!r} to {self.socket.label!r} of block {self.socket_block_id!r}')

        if self.workspace is not None:
            self.workspace.record_connection(self)

    def disconnect(self) -> None:
        '''Separate the two connectors, announcing the removed link to the workspace (if any)'''
        if not self._connected:
            raise LinkStateError(f'{self!r} is not connected')

        self.plug.linked_block_id = None
        self.socket.linked_block_id = None
        self._connected = False
        LOGGER.info(f'Disconnected {self.plug.label!r} of block {self.plug_block_id!r} from {self.socket.label!r} of block {self.socket_block_id!r}')

        if self.workspace is not None:
            self.workspace.record_disconnection(self)

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            f'plug=({self.plug_block_id!r}, {self.plug.label!r}), '
            f'socket=({self.socket_block_id!r}, {self.socket.label!r}), '
            f'connected={self._connected})'
        )

LinkT = TypeVar('LinkT', covariant=True)

@runtime_checkable
class LinkFactory(Protocol[LinkT]):
    '''Anything which can materialize a link once a pair of connectors has been approved'''
    def build_link(
        self,
        block1 : Block,
        block2 : Block,
        connector1 : Connector,
        connector2 : Connector,
    ) -> LinkT:
        ...

class BlockLinkFactory:
    '''Default LinkFactory, producing BlockLinks bound to a given workspace (if any)'''
    def __init__(self, workspace : Optional['Workspace']=None) -> None:
        self.workspace = workspace

    def build_link(
        self,
        block1 : Block,
        block2 : Block,
        connector1 : Connector,
        connector2 : Connector,
    ) -> BlockLink:
        link = BlockLink(block1, block2, connector1, connector2, workspace=self.workspace)
        LOGGER.debug(f'Built {link!r}')

        return link
