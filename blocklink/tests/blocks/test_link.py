'''Unit tests for BlockLinks and the factories which build them'''

__author__ = 'BlockLink Developers'

import pytest

from blocklink.blocks.block import Block
from blocklink.blocks.connection import Connector, ConnectorKind, IncompatibleConnectorError, LinkStateError
from blocklink.blocks.link import BlockLink, BlockLinkFactory, LinkFactory
from blocklink.workspace.events import WorkspaceEventType
from blocklink.workspace.workspace import Workspace


def make_pair() -> tuple[Block, Block]:
    '''A block with a number plug, and a block with a number socket'''
    plugged = Block('plugged', leading=Connector(ConnectorKind.PLUG, 'number', label='out'))
    socketed = Block('socketed', sockets=[Connector(ConnectorKind.SOCKET, 'number', label='in')])

    return plugged, socketed

class EventRecorder:
    def __init__(self) -> None:
        self.events = []

    def workspace_event_occurred(self, event) -> None:
        self.events.append(event)

# role assignment tests
@pytest.mark.parametrize('reverse', [False, True])
def test_link_roles_independent_of_order(reverse : bool) -> None:
    '''Test that the plug and socket sides are identified regardless of argument order'''
    plugged, socketed = make_pair()
    args = (plugged, socketed, plugged.plug, socketed.sockets[0])
    if reverse:
        args = (socketed, plugged, socketed.sockets[0], plugged.plug)
    link = BlockLink(*args)

    assert (link.plug is plugged.plug) and (link.socket is socketed.sockets[0])
    assert (link.plug_block_id == 'plugged') and (link.socket_block_id == 'socketed')
    assert link.block1 is args[0] # original order preserved alongside roles

def test_link_two_plugs() -> None:
    '''Test that a link cannot join two outgoing connectors'''
    first = Block('first', leading=Connector(ConnectorKind.PLUG))
    second = Block('second', leading=Connector(ConnectorKind.BEFORE))
    with pytest.raises(IncompatibleConnectorError):
        _ = BlockLink(first, second, first.plug, second.before_connector)

def test_link_foreign_connector() -> None:
    '''Test that a link cannot name a connector which is not on the block given for it'''
    plugged, socketed = make_pair()
    with pytest.raises(IncompatibleConnectorError):
        _ = BlockLink(plugged, socketed, plugged.plug, Connector(ConnectorKind.SOCKET, 'number'))

# connection tests
def test_connect_marks_connectors() -> None:
    '''Test that connecting points each connector at the opposite block, and disconnecting undoes it'''
    plugged, socketed = make_pair()
    link = BlockLink(plugged, socketed, plugged.plug, socketed.sockets[0])
    link.connect()
    assert link.is_connected and (plugged.plug.linked_block_id == 'socketed') and (socketed.sockets[0].linked_block_id == 'plugged')

    link.disconnect()
    assert not (link.is_connected or plugged.plug.is_linked or socketed.sockets[0].is_linked)

def test_connect_twice() -> None:
    plugged, socketed = make_pair()
    link = BlockLink(plugged, socketed, plugged.plug, socketed.sockets[0])
    link.connect()
    with pytest.raises(LinkStateError):
        link.connect()

def test_disconnect_unconnected() -> None:
    plugged, socketed = make_pair()
    link = BlockLink(plugged, socketed, plugged.plug, socketed.sockets[0])
    with pytest.raises(LinkStateError):
        link.disconnect()

def test_connect_announced_to_workspace() -> None:
    '''Test that links bound to a workspace announce their (dis)connection there'''
    plugged, socketed = make_pair()
    workspace = Workspace([plugged, socketed])
    recorder = EventRecorder()
    workspace.add_workspace_listener(recorder)

    link = BlockLink(plugged, socketed, plugged.plug, socketed.sockets[0], workspace=workspace)
    link.connect()
    assert workspace.topology.has_edge('plugged', 'socketed')
    link.disconnect()
    assert not workspace.topology.has_edge('plugged', 'socketed')

    assert [event.event_type for event in recorder.events] == [WorkspaceEventType.BLOCKS_CONNECTED, WorkspaceEventType.BLOCKS_DISCONNECTED]
    assert all(event.link is link for event in recorder.events)

# factory tests
def test_factory_binds_workspace() -> None:
    '''Test that the default factory builds unconnected links bound to its workspace'''
    plugged, socketed = make_pair()
    workspace = Workspace([plugged, socketed])
    factory = BlockLinkFactory(workspace)
    link = factory.build_link(plugged, socketed, plugged.plug, socketed.sockets[0])

    assert isinstance(factory, LinkFactory)
    assert isinstance(link, BlockLink) and (link.workspace is workspace) and not link.is_connected
