'''The stock set of rules governing which blocks may join which'''

__author__ = 'BlockLink Developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Optional, TYPE_CHECKING

from .base import LinkRule
from ..blocks.block import Block
from ..blocks.connection import Connector, ConnectorKind
from ..blocks.topology import LinkTopology
from ..workspace.events import WorkspaceEvent, WorkspaceEventType

if TYPE_CHECKING:
    from ..workspace.workspace import Workspace


def socket_side(connector1 : Connector, connector2 : Connector) -> Optional[Connector]:
    '''Of a pair of Connectors, the one which accepts the other (None if neither or both are socket-equivalent)'''
    if connector1.kind.is_socket_equivalent and connector2.kind.is_plug_equivalent:
        return connector1
    elif connector2.kind.is_socket_equivalent and connector1.kind.is_plug_equivalent:
        return connector2
    return None

class ConstantRule(LinkRule):
    '''A rule which gives the same verdict for every pair of connectors'''
    def __init__(self, verdict : bool=True, mandatory : bool=False, name : Optional[str]=None) -> None:
        super().__init__(
            mandatory=mandatory,
            name=('AlwaysAccept' if verdict else 'AlwaysReject') if (name is None) else name,
        )
        self.verdict = verdict

    def can_link(self, block1 : Block, block2 : Block, connector1 : Connector, connector2 : Connector) -> bool:
        return self.verdict

class MatchingTypesRule(LinkRule):
    '''Connectors may only join when they carry the same data type tag (e.g. a "number" plug into a "number" socket)'''
    def can_link(self, block1 : Block, block2 : Block, connector1 : Connector, connector2 : Connector) -> bool:
        return connector1.type_matches(connector2)

class ComplementaryKindsRule(LinkRule):
    '''Plugs may only join sockets, and before-connectors may only join after-connectors'''
    def __init__(self, mandatory : bool=True, name : Optional[str]=None) -> None:
        super().__init__(mandatory=mandatory, name=name)

    def can_link(self, block1 : Block, block2 : Block, connector1 : Connector, connector2 : Connector) -> bool:
        return connector1.kind_complements(connector2)

class VacantSocketRule(LinkRule):
    '''
    The accepting side of a link must not already hold another block

    By default only ordinary sockets are held to this; after-connectors are exempt, since
    a sequence may be spliced open to admit another block between two already-joined ones
    '''
    def __init__(
        self,
        mandatory : bool=True,
        name : Optional[str]=None,
        include_after_connectors : bool=False,
    ) -> None:
        super().__init__(mandatory=mandatory, name=name)
        self.include_after_connectors = include_after_connectors

    def can_link(self, block1 : Block, block2 : Block, connector1 : Connector, connector2 : Connector) -> bool:
        accepting = socket_side(connector1, connector2)
        if accepting is None:
            return False
        if (accepting.kind == ConnectorKind.AFTER) and not self.include_after_connectors:
            return True

        return not accepting.is_linked

class AcyclicRule(LinkRule):
    '''
    A link may not join two blocks which are already joined (directly or through other blocks),
    since doing so would close a loop in the program

    Keeps a private LinkTopology which it updates from workspace events;
    register it with a checker (or directly with a Workspace) so that it receives them
    '''
    def __init__(
        self,
        mandatory : bool=True,
        name : Optional[str]=None,
        workspace : Optional['Workspace']=None,
    ) -> None:
        super().__init__(mandatory=mandatory, name=name)
        self.topology = LinkTopology()
        if workspace is not None:
            self.rebuild(workspace)

    def rebuild(self, workspace : 'Workspace') -> None:
        '''Discard the cached topology and copy that of the given workspace afresh'''
        self.topology = LinkTopology(workspace.topology)
        LOGGER.debug(f'Rebuilt topology cache of {self!r} ({self.topology!r})')

    # Implementing WorkspaceListener contracts
    def workspace_event_occurred(self, event : WorkspaceEvent) -> None:
        if event.event_type == WorkspaceEventType.BLOCKS_CONNECTED:
            self.topology.add_link(event.link)
        elif event.event_type == WorkspaceEventType.BLOCKS_DISCONNECTED:
            self.topology.remove_link(event.link)
        elif event.event_type == WorkspaceEventType.BLOCK_REMOVED:
            if self.topology.has_node(event.block_id):
                self.topology.remove_node(event.block_id)

    def can_link(self, block1 : Block, block2 : Block, connector1 : Connector, connector2 : Connector) -> bool:
        return not self.topology.would_close_cycle(block1.block_id, block2.block_id)
