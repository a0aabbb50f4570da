from typing import Optional

class WarpError(RuntimeError):
    """Base class for errors raised by the warp client."""

class ProfileListError(WarpError):
    """
    Raised when `warp agent profile list` does not exit cleanly.
    """
    def __init__(self, stderr: str, exit_code: Optional[int]):
        self.stderr = stderr
        self.exit_code = exit_code
        super().__init__(f"Failed to list profiles (exit code {exit_code}): {stderr}")

class WarpProcessError(WarpError):
    """
    Raised when the warp process cannot be started in stream mode.
    """
    def __init__(self, cmd: str, reason: str):
        self.cmd = cmd
        super().__init__(f"Could not start '{cmd}': {reason}")
