from .node import NodeClient
from .poller import StatusPoller, render_table

__all__ = ["NodeClient", "StatusPoller", "render_table"]
