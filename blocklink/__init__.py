"""Connector-compatibility and proximity-matching engine for jigsaw-style block programming editors"""

# Add imports here
from .blocks import (
    Block,
    BlockLink,
    BlockLinkFactory,
    Connector,
    ConnectorKind,
    LinkFactory,
    has_plug_equivalent,
    plug_equivalent,
    socket_equivalents,
)
from .workspace import Workspace, CanvasBlockView, BlockView
from .rules import LinkRule, PredicateRule, RuleRegistry
from .linkcheck import BlockLinkChecker

from ._version import __version__

TOOLKIT_NAME : str = 'BlockLink'
