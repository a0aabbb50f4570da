from __future__ import annotations
from typing import Optional
import logging

from warp_client.cmd_line.cmd_tools import CmdLineRunner, ProcessHandle
from warp_client.core.args import build_agent_run_args, redact_args
from warp_client.core.options import merge_options
from warp_client.core.types import RunOptions, ExecutionResult

logger = logging.getLogger(__name__)

class AgentResource:
    """
    Runs `warp agent run` with the client defaults layered under call options.
    """
    def __init__(self, binary: str, defaults: RunOptions, runner: CmdLineRunner):
        self._binary = binary
        self._defaults = defaults
        self._runner = runner

    def _prepare(self, options: Optional[RunOptions]) -> tuple[list[str], Optional[str]]:
        merged = merge_options(self._defaults, options or RunOptions())
        return build_agent_run_args(merged), merged.cwd

    def run(self, options: Optional[RunOptions] = None) -> ExecutionResult:
        """
        Runs an agent task and waits for it to finish.

        Args:
            options (RunOptions, optional): Call options. Defaults to the client defaults only.

        Returns:
            ExecutionResult: Captured output. A failed run is reported through
            `exit_code`, never raised.
        """
        args, cwd = self._prepare(options)
        logger.info("Running warp agent", extra={"cwd": cwd})
        result = self._runner.execute_cmd(self._binary, args, cwd=cwd, log_args=redact_args(args))
        if not result.ok:
            logger.warning(f"Warp agent exited with code {result.exit_code}")
        return result

    def stream(self, options: Optional[RunOptions] = None) -> ProcessHandle:
        """
        Starts an agent task and returns immediately.

        Args:
            options (RunOptions, optional): Call options. Defaults to the client defaults only.

        Returns:
            ProcessHandle: Live handle for incremental output.
        """
        args, cwd = self._prepare(options)
        logger.info("Starting warp agent", extra={"cwd": cwd})
        return self._runner.monitor_cmd(self._binary, args, cwd=cwd, log_args=redact_args(args))
