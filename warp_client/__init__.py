"""
Warp Client - A Python client for the `warp` command-line agent.

This package provides:
- Option merging and argument building for `warp agent run`
- Blocking and streamed execution of the warp binary
- Parsing of the profile listing table
- Agent runs and profile lookups exposed as LLM tools
"""

__version__ = "0.1.0"
__author__ = "wpierozak"
__license__ = "GPL-3.0-or-later"

# Core imports for convenience
from warp_client.client.warp import WarpClient
from warp_client.core.enums import OutputFormat
from warp_client.core.types import RunOptions, ProfileListOptions, ExecutionResult, Profile
from warp_client.core.exceptions import WarpError, ProfileListError, WarpProcessError
from warp_client.core.config import ClientConfig, load_config
from warp_client.core.logging_config import setup_logging

__all__ = [
    "WarpClient",
    "OutputFormat",
    "RunOptions",
    "ProfileListOptions",
    "ExecutionResult",
    "Profile",
    "WarpError",
    "ProfileListError",
    "WarpProcessError",
    "ClientConfig",
    "load_config",
    "setup_logging",
]
