'''Sorting the connectors of a block into plug-equivalents and socket-equivalents'''

__author__ = 'BlockLink Developers'

from typing import Optional, Protocol

from .connection import Connector, PlugExclusivityError


class BlockLike(Protocol):
    '''Anything exposing the connector topology of a block'''
    @property
    def has_plug(self) -> bool: ...
    @property
    def plug(self) -> Optional[Connector]: ...
    @property
    def has_before_connector(self) -> bool: ...
    @property
    def before_connector(self) -> Optional[Connector]: ...
    @property
    def has_after_connector(self) -> bool: ...
    @property
    def after_connector(self) -> Optional[Connector]: ...
    @property
    def sockets(self) -> tuple[Connector, ...]: ...


def has_plug_equivalent(block : Optional[BlockLike]) -> bool:
    '''
    Whether a block has an outgoing (plug or before) connector
    Absent blocks have none; a block reporting BOTH a plug and a before-connector is malformed
    '''
    if block is None:
        return False

    has_plug = block.has_plug
    has_before = block.has_before_connector
    if has_plug and has_before: # should have at most one plug-type connector
        raise PlugExclusivityError(f'{block!r} has both a plug and a before-connector')

    return has_plug or has_before

def plug_equivalent(block : Optional[BlockLike]) -> Optional[Connector]:
    '''The plug of a block if it has one, otherwise its before-connector, otherwise None'''
    if not has_plug_equivalent(block):
        return None
    if block.has_plug:
        return block.plug

    return block.before_connector

def socket_equivalents(block : Optional[BlockLike]) -> tuple[Connector, ...]:
    '''
    The incoming connectors of a block: its ordinary sockets in order, followed by its after-connector (if any)
    Returned as a tuple, so it cannot be used to modify the block's own connectors
    '''
    if block is None:
        return tuple()
    if not block.has_after_connector:
        return tuple(block.sockets)

    return (*block.sockets, block.after_connector)
