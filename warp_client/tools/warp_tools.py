from __future__ import annotations
from typing import Optional
import time

from warp_client.client.warp import WarpClient
from warp_client.cmd_line.cmd_tools import ProcessHandle
from warp_client.core.exceptions import ProfileListError, WarpProcessError
from warp_client.core.tools import ToolProvider, toolmethod
from warp_client.core.types import RunOptions

class WarpTools(ToolProvider):
    def __init__(self, client: WarpClient):
        super().__init__()
        self.client = client
        self.handle : Optional[ProcessHandle] = None

    @toolmethod(name = "run_agent")
    def run_agent(self, prompt: str, profile: Optional[str] = None, cwd: Optional[str] = None) -> str:
        """
        Runs a warp agent task and waits for it to finish.

        Args:
            prompt (str): The task for the agent.
            profile (str, optional): Agent profile id. Defaults to the client default.
            cwd (str, optional): Directory the agent works in. Defaults to the client default.

        Returns:
            str: The exit code and output of the agent.
        """
        result = self.client.agent.run(RunOptions(prompt=prompt, profile=profile, cwd=cwd))
        return f"Exit code: {result.exit_code}\nStdout: {result.stdout}\nStderr: {result.stderr}"

    @toolmethod(name = "start_agent")
    def start_agent(self, prompt: str, profile: Optional[str] = None, cwd: Optional[str] = None) -> str:
        """
        Starts a warp agent task in background mode.
        To follow its output use monitor_agent tool.

        Args:
            prompt (str): The task for the agent.
            profile (str, optional): Agent profile id. Defaults to the client default.
            cwd (str, optional): Directory the agent works in. Defaults to the client default.

        Returns:
            str: Confirmation or error message.
        """
        if self.handle is not None and self.handle.is_running():
            return "Error: An agent is already running in background. Please stop it or wait for it to finish."
        try:
            self.handle = self.client.agent.stream(RunOptions(prompt=prompt, profile=profile, cwd=cwd))
        except WarpProcessError as err:
            return f"Error: {err}"
        return "Agent started in background mode."

    @toolmethod(name = "monitor_agent")
    def monitor_agent(self, timeout: Optional[float] = None, min_time: float = 0.0) -> str:
        """
        Collects output of the agent started in background.

        Args:
            timeout (float, optional): The timeout in seconds. Defaults to None (until output or exit).
            min_time (float, optional): Minimum time in seconds to wait before returning. Defaults to 0.0.

        Returns:
            str: New output of the agent, and its exit code once it has finished.
        """
        if self.handle is None:
            return "Error: No agent started."

        start_time = time.time()
        output = ""
        while True:
            output += self.handle.read_all()
            if not self.handle.is_running():
                output += self.handle.read_all()
                return f"Agent finished with code {self.handle.exit_code}\nOutput:\n{output}"

            elapsed_time = time.time() - start_time
            if elapsed_time >= min_time:
                if output:
                    break
                if timeout is not None and elapsed_time > timeout:
                    break
            time.sleep(0.1)
        return f"Output:\n{output}"

    @toolmethod(name = "stop_agent")
    def stop_agent(self) -> str:
        """
        Stops the agent started in background.
        """
        if self.handle is None or not self.handle.is_running():
            return "Error: No running agent."
        self.handle.terminate()
        return "Agent stopped."

    @toolmethod(name = "list_profiles")
    def list_profiles(self) -> str:
        """
        Lists the available agent profiles.

        Returns:
            str: One "id: name" line per profile, or an error message.
        """
        try:
            profiles = self.client.profiles.list()
        except ProfileListError as err:
            return f"Error: {err}"
        if not profiles:
            return "No profiles found."
        return "\n".join(f"{p.id}: {p.name}" for p in profiles)
