from __future__ import annotations
from enum import Enum
from typing import Any, Iterable, Optional

from warp_client.core.enums import SubCommand
from warp_client.core.types import RunOptions, ProfileListOptions

API_KEY_FLAG = "--api-key"
REDACTED = "***"

def _value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)

def _add_flag(args: list[str], flag: str, value: Any):
    if value:
        args.extend([flag, _value(value)])

def _add_repeated(args: list[str], flag: str, values: Optional[Iterable[str]]):
    # one flag per item, e.g. --share a --share b
    for item in values or []:
        args.extend([flag, _value(item)])

def build_agent_run_args(options: RunOptions) -> list[str]:
    """
    Builds the argument vector for `warp agent run`.

    The order of flags is fixed regardless of how the options were constructed.

    Args:
        options (RunOptions): Already merged options.

    Returns:
        list[str]: Tokens to pass after the binary name.
    """
    args = SubCommand.AGENT_RUN.tokens()
    _add_flag(args, API_KEY_FLAG, options.api_key)
    if options.debug:
        args.append("--debug")
    _add_flag(args, "--prompt", options.prompt)
    _add_flag(args, "--saved-prompt", options.saved_prompt)
    _add_flag(args, "--output-format", options.output_format)
    _add_repeated(args, "--share", options.share)
    _add_flag(args, "--profile", options.profile)
    _add_repeated(args, "--mcp-server", options.mcp_servers)
    _add_flag(args, "--environment", options.environment)
    _add_flag(args, "--cwd", options.cwd)
    return args

def build_profile_list_args(options: ProfileListOptions) -> list[str]:
    """
    Builds the argument vector for `warp agent profile list`.

    Args:
        options (ProfileListOptions): Already merged options.

    Returns:
        list[str]: Tokens to pass after the binary name.
    """
    args = SubCommand.PROFILE_LIST.tokens()
    _add_flag(args, API_KEY_FLAG, options.api_key)
    if options.debug:
        args.append("--debug")
    return args

def redact_args(args: list[str]) -> list[str]:
    """Returns a copy of `args` with the API key value masked, for logging."""
    redacted = list(args)
    for idx, token in enumerate(redacted[:-1]):
        if token == API_KEY_FLAG:
            redacted[idx + 1] = REDACTED
    return redacted
