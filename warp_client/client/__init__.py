"""Client module - Facade over the warp binary."""

from warp_client.client.warp import WarpClient
from warp_client.client.agent import AgentResource
from warp_client.client.profiles import ProfilesResource

__all__ = ["WarpClient", "AgentResource", "ProfilesResource"]
