'''Lifecycle notifications emitted by a workspace, and the contract for objects which wish to receive them'''

__author__ = 'BlockLink Developers'

from typing import Hashable, Optional, Protocol, TYPE_CHECKING, runtime_checkable
from dataclasses import dataclass
from enum import Enum

if TYPE_CHECKING:
    from ..blocks.link import BlockLink


class WorkspaceEventType(Enum):
    '''The kinds of change a workspace announces to its listeners'''
    BLOCK_ADDED = 'block_added'
    BLOCK_REMOVED = 'block_removed'
    BLOCK_CHANGED = 'block_changed'
    BLOCKS_CONNECTED = 'blocks_connected'
    BLOCKS_DISCONNECTED = 'blocks_disconnected'

@dataclass(frozen=True)
class WorkspaceEvent:
    '''
    A single change to the contents of a workspace
    Block events carry the identity of the affected block; connection events carry the link made or undone
    '''
    event_type : WorkspaceEventType
    block_id : Optional[Hashable] = None
    link : Optional['BlockLink'] = None

@runtime_checkable
class WorkspaceListener(Protocol):
    '''Any object which reacts to workspace lifecycle events (e.g. to keep an internal cache current)'''
    def workspace_event_occurred(self, event : WorkspaceEvent) -> None:
        ...
