from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Sequence, Union
import json

from warp_client.core.enums import OutputFormat

@dataclass(frozen=True)
class ProfileListOptions:
    """
    Options accepted by `warp agent profile list`.
    """
    api_key: Optional[str] = None
    debug: Optional[bool] = None

@dataclass(frozen=True)
class RunOptions:
    """
    Options accepted by `warp agent run`.

    Every field defaults to None, which means the flag is left out of the
    command line. The same record is used for the client defaults.
    `share` and `mcp_servers` accept any sequence and are stored as tuples,
    so later changes to the caller's list do not leak into the record.
    """
    api_key: Optional[str] = None
    debug: Optional[bool] = None
    prompt: Optional[str] = None
    saved_prompt: Optional[str] = None
    output_format: Optional[Union[OutputFormat, str]] = None
    cwd: Optional[str] = None
    share: Optional[Sequence[str]] = None
    profile: Optional[str] = None
    mcp_servers: Optional[Sequence[str]] = None
    environment: Optional[str] = None

    def __post_init__(self):
        for name in ("share", "mcp_servers"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

@dataclass(frozen=True)
class ExecutionResult:
    stdout: str
    stderr: str
    exit_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def combined(self) -> str:
        return (self.stdout or "") + ("\n" if self.stdout and self.stderr else "") + (self.stderr or "")

    def json_str(self):
        return json.dumps(asdict(self))

@dataclass(frozen=True)
class Profile:
    id: str
    name: str

    def __str__(self):
        return json.dumps(asdict(self))
