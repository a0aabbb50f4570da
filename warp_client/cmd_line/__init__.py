"""Command line module - Command execution and process monitoring."""

from warp_client.cmd_line.cmd_tools import (
    CmdLineRunner,
    CmdLineMonitor,
    ProcessHandle,
)

__all__ = ["CmdLineRunner", "CmdLineMonitor", "ProcessHandle"]
