'''The canvas on which blocks live: block registry, lifecycle events, and on-screen views'''

from .events import WorkspaceEventType, WorkspaceEvent, WorkspaceListener
from .workspace import Workspace, MissingBlockError
from .views import BlockView, CanvasBlockView, MissingConnectorPositionError, absolute_connector_position
