'''Rule evaluation and proximity matching for links between blocks'''

__author__ = 'BlockLink Developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    Any,
    ClassVar,
    Generator,
    Iterable,
    NamedTuple,
    Optional,
)

from ..blocks.block import Block
from ..blocks.classify import plug_equivalent, socket_equivalents
from ..blocks.connection import Connector
from ..blocks.link import LinkFactory, BlockLinkFactory
from ..geometry.measure import distances_from
from ..rules.base import LinkRule
from ..rules.registry import RuleRegistry
from ..workspace.views import BlockView, absolute_connector_position
from ..workspace.workspace import Workspace


class LinkCandidate(NamedTuple):
    '''The best pairing found so far during a proximity search'''
    distance : float
    block2 : Block
    connector1 : Connector # always on the dragged block
    connector2 : Connector # always on block2

class BlockLinkChecker:
    '''
    Determines whether two blocks can join, and at which of their connectors

    Consults an ordered registry of LinkRules: every mandatory rule must accept a pairing,
    and at least one advisory rule must accept it as well. Approved pairings are handed off
    to a LinkFactory, which materializes the actual link

    Parameters
    ----------
    workspace : Workspace
        Registry from which blocks are read by identity, and to which rules which observe workspace events are subscribed
    rules : Optional[Iterable[LinkRule]]
        Rules to register initially, in order
    link_factory : Optional[LinkFactory]
        Builds links for approved pairings; defaults to a BlockLinkFactory bound to the workspace
    max_link_distance : float, default 20.0
        Connectors must lie strictly closer than this (in canvas units) to be matched while dragging
    '''
    MAX_LINK_DISTANCE : ClassVar[float] = 20.0

    def __init__(
        self,
        workspace : Workspace,
        rules : Optional[Iterable[LinkRule]]=None,
        link_factory : Optional[LinkFactory]=None,
        max_link_distance : Optional[float]=None,
    ) -> None:
        self.workspace = workspace
        self.registry = RuleRegistry()
        self.link_factory = BlockLinkFactory(workspace) if (link_factory is None) else link_factory
        self.max_link_distance = type(self).MAX_LINK_DISTANCE if (max_link_distance is None) else float(max_link_distance)

        if rules is not None:
            for rule in rules:
                self.add_rule(rule)

    # Rule registration
    @property
    def rules(self) -> tuple[LinkRule, ...]:
        '''Registered rules, in the order they are consulted'''
        return tuple(self.registry)

    def add_rule(self, rule : LinkRule) -> None:
        '''
        Add a rule to the end of the rule list (moving it there if already present)
        Rules which also observe workspace events are subscribed to the workspace
        '''
        entry = self.registry.add_rule(rule)
        if entry.observes_workspace:
            self.workspace.add_workspace_listener(entry.listener)

    def insert_rule(self, position : int, rule : LinkRule) -> None:
        '''Place a rule at the given position of the rule list (moving it there if already present)'''
        entry = self.registry.insert_rule(position, rule)
        if entry.observes_workspace:
            self.workspace.add_workspace_listener(entry.listener)

    def remove_rule(self, rule : LinkRule) -> None:
        '''Remove a rule from the rule list, unsubscribing it from the workspace if it had been subscribed'''
        entry = self.registry.remove_rule(rule)
        if entry.observes_workspace:
            self.workspace.remove_workspace_listener(entry.listener)

    # Rule evaluation
    def admissible(
        self,
        block1 : Optional[Block],
        block2 : Optional[Block],
        connector1 : Optional[Connector],
        connector2 : Optional[Connector],
    ) -> bool:
        '''
        Whether joining connector1 (on block1) with connector2 (on block2) satisfies the registered rules

        Any failing mandatory rule vetoes the pairing outright. Otherwise, the pairing is admissible
        only if at least one advisory rule accepts it; hence with no advisory rules registered
        (including when no rules are registered at all) nothing is admissible
        '''
        if any(part is None for part in (block1, block2, connector1, connector2)):
            return False

        found_rule : bool = False
        for rule in self.registry:
            verdict = rule.can_link(block1, block2, connector1, connector2)
            if not rule.mandatory:
                found_rule |= bool(verdict)
            elif not verdict:
                LOGGER.debug(f'{rule!r} vetoed pairing of {connector1!r} with {connector2!r}')
                return False

        return found_rule

    def can_link(
        self,
        block1 : Optional[Block],
        block2 : Optional[Block],
        connector1 : Optional[Connector],
        connector2 : Optional[Connector],
    ) -> Optional[Any]:
        '''A link joining the given connectors of the given blocks if the rules allow it, or None otherwise'''
        if not self.admissible(block1, block2, connector1, connector2):
            return None
        return self.link_factory.build_link(block1, block2, connector1, connector2)

    # Proximity matching
    @staticmethod
    def _plug_to_socket_distances(
        plug_block : Block,
        plug_view : BlockView,
        socket_block : Block,
        socket_view : BlockView,
    ) -> Generator[tuple[Connector, Connector, float], None, None]:
        '''
        Generates (plug, socket, distance) for the plug-equivalent of one block against
        each socket-equivalent of another, in socket order (sockets first, then after-connector)
        '''
        plug = plug_equivalent(plug_block)
        if plug is None:
            return

        sockets = socket_equivalents(socket_block)
        distances = distances_from(
            absolute_connector_position(plug_view, plug),
            (absolute_connector_position(socket_view, socket) for socket in sockets),
        )
        for socket, distance in zip(sockets, distances):
            yield plug, socket, float(distance)

    def find_best_link(
        self,
        dragged_view : BlockView,
        neighbor_views : Iterable[BlockView],
    ) -> Optional[Any]:
        '''
        Find the closest admissible pairing between the connectors of a dragged block and those of its neighbors

        Only pairings strictly closer than the maximum link distance are considered. Neighbors which
        are the dragged block itself, or which (like the dragged block) are hidden or collapsed, are skipped.
        Ties in distance go to whichever pairing was encountered first: neighbors in the order given,
        the dragged block's plug against each neighbor's sockets before each neighbor's plug against the dragged block's sockets

        Returns a link (as built by this checker's LinkFactory) for the best pairing, or None if there is none
        '''
        block1 = self.workspace.get_block(dragged_view.block_id)
        best : Optional[LinkCandidate] = None
        closest_distance : float = self.max_link_distance

        for neighbor_view in neighbor_views:
            block2 = self.workspace.get_block(neighbor_view.block_id)
            if (
                (block1 == block2)
                or not dragged_view.is_visible()
                or not neighbor_view.is_visible()
                or dragged_view.is_collapsed()
                or neighbor_view.is_collapsed()
            ):
                continue

            # dragged block's plug into neighbor's sockets
            for plug, socket, distance in self._plug_to_socket_distances(block1, dragged_view, block2, neighbor_view):
                if (distance < closest_distance) and self.admissible(block1, block2, plug, socket):
                    best = LinkCandidate(distance, block2, plug, socket)
                    closest_distance = distance
                    LOGGER.debug(f'Closest pairing so far: {plug!r} with {socket!r} at distance {distance}')

            # neighbor's plug into dragged block's sockets
            for plug, socket, distance in self._plug_to_socket_distances(block2, neighbor_view, block1, dragged_view):
                if (distance < closest_distance) and self.admissible(block1, block2, socket, plug):
                    best = LinkCandidate(distance, block2, socket, plug)
                    closest_distance = distance
                    LOGGER.debug(f'Closest pairing so far: {socket!r} with {plug!r} at distance {distance}')

        if best is None:
            return None
        return self.link_factory.build_link(block1, best.block2, best.connector1, best.connector2)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(num_rules={len(self.registry)}, max_link_distance={self.max_link_distance})'
