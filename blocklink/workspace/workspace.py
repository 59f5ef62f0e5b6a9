'''The shared registry of blocks on a canvas, and the dispatcher of its lifecycle events'''

__author__ = 'BlockLink Developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Iterable, Iterator, Optional

from .events import WorkspaceEvent, WorkspaceEventType, WorkspaceListener
from ..blocks.block import Block
from ..blocks.connection import BlockID, BlockLinkError
from ..blocks.link import BlockLink
from ..blocks.topology import LinkTopology
from ..utils.containers import RecencyOrderedSet


class MissingBlockError(BlockLinkError, KeyError):
    '''Raised when a block identity is looked up which the workspace does not hold'''
    pass

class Workspace:
    '''
    Owns the blocks present on a canvas, keyed by their identities

    Other components (rules, the link checker) only ever read blocks out of the Workspace by identity.
    Every addition, removal, change, and (dis)connection of blocks is announced to registered WorkspaceListeners,
    in the order those listeners were (most recently) registered
    '''
    def __init__(self, blocks : Optional[Iterable[Block]]=None) -> None:
        self._blocks : dict[BlockID, Block] = dict()
        self._listeners : RecencyOrderedSet[WorkspaceListener] = RecencyOrderedSet()
        self.topology = LinkTopology()

        if blocks is not None:
            self.add_blocks(blocks)

    # Block registry
    def get_block(self, block_id : BlockID) -> Block:
        '''The block registered under the given identity'''
        try:
            return self._blocks[block_id]
        except KeyError:
            raise MissingBlockError(f'No block with identity {block_id!r} in workspace')

    def has_block(self, block_id : BlockID) -> bool:
        return block_id in self._blocks
    __contains__ = has_block

    @property
    def blocks(self) -> tuple[Block, ...]:
        '''All registered blocks, in order of registration'''
        return tuple(self._blocks.values())

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def add_block(self, block : Block) -> BlockID:
        '''Register a block under its identity, then return that identity'''
        if (registered := self._blocks.get(block.block_id)) is not None:
            if registered is block:
                return block.block_id
            raise ValueError(f'A different block is already registered under identity {block.block_id!r}')

        self._blocks[block.block_id] = block
        self.topology.add_node(block.block_id)
        LOGGER.info(f'Added {block!r} to workspace')
        self.notify_listeners(WorkspaceEvent(WorkspaceEventType.BLOCK_ADDED, block_id=block.block_id))

        return block.block_id

    def add_blocks(self, blocks : Iterable[Block]) -> list[BlockID]:
        '''Register multiple blocks at once, returning their identities'''
        return [self.add_block(block) for block in blocks]

    def remove_block(self, block_id : BlockID) -> Block:
        '''
        Unregister the block with the given identity and return it

        Any links recorded against the block are undone first, freeing the connectors
        on the other side of them and announcing each disconnection before the removal itself
        '''
        block = self.get_block(block_id)
        for link in self.topology.links_of(block_id):
            was_connected = link.is_connected
            if was_connected:
                link.disconnect()
            if not (was_connected and link.workspace is self): # disconnect() only reports back to the link's own workspace
                self.record_disconnection(link)
        del self._blocks[block_id]
        if self.topology.has_node(block_id):
            self.topology.remove_node(block_id)
        LOGGER.info(f'Removed {block!r} from workspace')
        self.notify_listeners(WorkspaceEvent(WorkspaceEventType.BLOCK_REMOVED, block_id=block_id))

        return block

    def notify_block_changed(self, block_id : BlockID) -> None:
        '''Announce that some aspect of a registered block has changed'''
        self.get_block(block_id) # DEV: validates identity before announcing anything
        self.notify_listeners(WorkspaceEvent(WorkspaceEventType.BLOCK_CHANGED, block_id=block_id))

    # Connections
    def record_connection(self, link : BlockLink) -> None:
        '''Note a newly-realized link between two registered blocks'''
        self.topology.add_link(link)
        self.notify_listeners(WorkspaceEvent(WorkspaceEventType.BLOCKS_CONNECTED, link=link))

    def record_disconnection(self, link : BlockLink) -> None:
        '''Note that a previously-realized link has been undone'''
        self.topology.remove_link(link)
        self.notify_listeners(WorkspaceEvent(WorkspaceEventType.BLOCKS_DISCONNECTED, link=link))

    # Listeners
    @property
    def listeners(self) -> tuple[WorkspaceListener, ...]:
        return tuple(self._listeners)

    def add_workspace_listener(self, listener : WorkspaceListener) -> None:
        '''Subscribe a listener to all subsequent workspace events'''
        if not isinstance(listener, WorkspaceListener):
            raise TypeError(f'Workspace listeners must implement workspace_event_occurred(), {type(listener)} does not')
        self._listeners.add(listener)
        LOGGER.debug(f'Registered workspace listener {listener!r}')

    def remove_workspace_listener(self, listener : WorkspaceListener) -> bool:
        '''Unsubscribe a listener, returning whether it had been subscribed'''
        return self._listeners.discard(listener)

    def notify_listeners(self, event : WorkspaceEvent) -> None:
        '''Pass an event to every registered listener'''
        for listener in self._listeners:
            listener.workspace_event_occurred(event)
