'''Graphs recording which blocks are joined to which, for rules which reason about connectivity'''

__author__ = 'BlockLink Developers'

from typing import ClassVar, Hashable, TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from .link import BlockLink


class LinkTopology(nx.Graph):
    '''
    An undirected graph whose nodes are block identities and whose edges
    stand for (one or more) realized links between the two blocks they join
    '''
    LINK_EDGE_ATTR : ClassVar[str] = 'links'

    def are_joined(self, block_id_1 : Hashable, block_id_2 : Hashable) -> bool:
        '''Whether some chain of links already leads from one block to the other'''
        if not (self.has_node(block_id_1) and self.has_node(block_id_2)):
            return False
        return nx.has_path(self, block_id_1, block_id_2)
    would_close_cycle = are_joined # adding a link between already-joined blocks always closes a cycle

    # link bookkeeping
    def links_of(self, block_id : Hashable) -> list['BlockLink']:
        '''All links recorded against the given block, whichever side of them it is on'''
        if not self.has_node(block_id):
            return []
        return [
            link
                for _, _, links in self.edges(block_id, data=self.LINK_EDGE_ATTR, default=())
                    for link in links
        ]

    def add_link(self, link : 'BlockLink') -> None:
        '''Record a realized link as an edge between the blocks it joins'''
        u, v = link.plug_block_id, link.socket_block_id
        if not self.has_edge(u, v):
            self.add_edge(u, v, **{self.LINK_EDGE_ATTR : []})
        links = self.edges[u, v][self.LINK_EDGE_ATTR]
        self.edges[u, v][self.LINK_EDGE_ATTR] = [*links, link] # DEV: rebind rather than append, as copies of a topology share edge attribute values

    def remove_link(self, link : 'BlockLink') -> None:
        '''Forget a realized link, dropping the edge once no links remain along it'''
        u, v = link.plug_block_id, link.socket_block_id
        if not self.has_edge(u, v):
            return

        links = self.edges[u, v][self.LINK_EDGE_ATTR]
        self.edges[u, v][self.LINK_EDGE_ATTR] = [other for other in links if other is not link]
        if not self.edges[u, v][self.LINK_EDGE_ATTR]:
            self.remove_edge(u, v)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(num_blocks={self.number_of_nodes()}, num_joins={self.number_of_edges()})'
