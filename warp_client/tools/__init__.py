"""Tools module - Warp agent operations exposed as LLM tools."""

from warp_client.tools.warp_tools import WarpTools

__all__ = ["WarpTools"]
