'''Blocks, their connectors, and the links which join them'''

from .connection import (
    BlockLinkError,
    IncompatibleConnectorError,
    ConnectorOwnershipError,
    PlugExclusivityError,
    LinkStateError,
    ConnectorKind,
    Connector,
)
from .block import Block
from .classify import has_plug_equivalent, plug_equivalent, socket_equivalents
from .link import BlockLink, LinkFactory, BlockLinkFactory
from .topology import LinkTopology
