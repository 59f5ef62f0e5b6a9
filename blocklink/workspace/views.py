'''The position-query interface through which on-screen block representations are consulted'''

__author__ = 'BlockLink Developers'

from typing import Hashable, Optional, Protocol, runtime_checkable
from dataclasses import dataclass, field

import numpy as np

from ..blocks.connection import BlockID, BlockLinkError, Connector
from ..geometry.arraytypes import Vector2, PointLike, as_point
from ..geometry.measure import absolute_position


class MissingConnectorPositionError(BlockLinkError, KeyError):
    '''Raised when a block view is asked for the position of a Connector it has not placed'''
    pass

@runtime_checkable
class BlockView(Protocol):
    '''
    The visual representation of a single block, as far as link-checking is concerned

    Implementations answer only where things are and whether they are shown;
    they are never asked to lay anything out
    '''
    @property
    def block_id(self) -> BlockID:
        '''Identity of the block being represented'''
        ...

    def is_visible(self) -> bool:
        ...

    def is_collapsed(self) -> bool:
        ...

    def location_on_screen(self) -> Vector2:
        '''Absolute screen position of the block's origin'''
        ...

    def socket_pixel_point(self, connector : Connector) -> Vector2:
        '''Position of one of the block's Connectors, relative to the block's origin'''
        ...

def absolute_connector_position(view : BlockView, connector : Connector) -> Vector2:
    '''Absolute screen position of a Connector, given the view of the block it belongs to'''
    return absolute_position(view.location_on_screen(), view.socket_pixel_point(connector))

# DEV: not frozen, since views are moved about (and shown/hidden) during drag interactions;
# eq=False keeps views hashable and avoids elementwise comparison of their array fields
@dataclass(frozen=False, eq=False)
class CanvasBlockView:
    '''
    A BlockView driven entirely by explicitly-assigned coordinates
    Suitable for headless matching, and for exercising matching logic against synthetic layouts
    '''
    block_id : Hashable
    location : np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=float))
    connector_offsets : dict[Connector, np.ndarray] = field(default_factory=dict)
    visible : bool = True
    collapsed : bool = False

    def __setattr__(self, key, value):
        if key == 'location':
            value = as_point(value)
        if key == 'connector_offsets':
            value = {
                connector : as_point(offset)
                    for connector, offset in value.items()
            }
        return super().__setattr__(key, value)

    def place_connector(self, connector : Connector, offset : PointLike) -> None:
        '''Set the position of a Connector relative to this view's origin'''
        self.connector_offsets[connector] = as_point(offset)

    def move_to(self, location : PointLike) -> None:
        '''Move the origin of this view to a new absolute position'''
        self.location = location

    # Implementing BlockView contracts
    def is_visible(self) -> bool:
        return self.visible

    def is_collapsed(self) -> bool:
        return self.collapsed

    def location_on_screen(self) -> Vector2:
        return np.array(self.location, copy=True)

    def socket_pixel_point(self, connector : Connector) -> Vector2:
        try:
            return np.array(self.connector_offsets[connector], copy=True)
        except KeyError:
            raise MissingConnectorPositionError(f'{connector!r} has not been placed on the view of block {self.block_id!r}')

    @classmethod
    def with_absolute_positions(
        cls,
        block_id : Hashable,
        absolute_positions : dict[Connector, PointLike],
        location : Optional[PointLike]=None,
        **kwargs,
    ) -> 'CanvasBlockView':
        '''Build a view from absolute connector positions, expressing each relative to the given origin (by default, the canvas origin)'''
        origin = as_point(location) if (location is not None) else np.zeros(2, dtype=float)
        return cls(
            block_id=block_id,
            location=origin,
            connector_offsets={
                connector : as_point(position) - origin
                    for connector, position in absolute_positions.items()
            },
            **kwargs,
        )
