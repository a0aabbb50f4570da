from __future__ import annotations
from typing import Optional
import logging

from warp_client.cmd_line.cmd_tools import CmdLineRunner
from warp_client.core.args import build_profile_list_args, redact_args
from warp_client.core.exceptions import ProfileListError
from warp_client.core.options import merge_options, profile_list_defaults
from warp_client.core.types import RunOptions, ProfileListOptions, Profile
from warp_client.table.parser import TableGlyphs, DEFAULT_GLYPHS, parse_profiles

logger = logging.getLogger(__name__)

class ProfilesResource:
    """
    Looks up agent profiles through `warp agent profile list`.
    """
    def __init__(self, binary: str, defaults: RunOptions, runner: CmdLineRunner, glyphs: TableGlyphs = DEFAULT_GLYPHS):
        self._binary = binary
        self._defaults = profile_list_defaults(defaults)
        self._runner = runner
        self._glyphs = glyphs

    def list(self, options: Optional[ProfileListOptions] = None) -> list[Profile]:
        """
        Lists the profiles available to the configured account.

        Args:
            options (ProfileListOptions, optional): Call options.

        Returns:
            list[Profile]: Profiles in the order the binary printed them.

        Raises:
            ProfileListError: If the listing command does not exit with code 0.
        """
        merged = merge_options(self._defaults, options or ProfileListOptions())
        args = build_profile_list_args(merged)
        result = self._runner.execute_cmd(self._binary, args, log_args=redact_args(args))
        if result.exit_code != 0:
            logger.error("Listing profiles failed", extra={"exit_code": result.exit_code})
            raise ProfileListError(result.stderr, result.exit_code)
        return parse_profiles(result.stdout, self._glyphs)

    def find_by_name(self, name: str, options: Optional[ProfileListOptions] = None) -> Optional[Profile]:
        """
        Finds a profile by name, ignoring case.

        Args:
            name (str): The profile name.
            options (ProfileListOptions, optional): Call options for the listing.

        Returns:
            Profile: The first matching profile, or None.
        """
        wanted = name.casefold()
        return next((p for p in self.list(options) if p.name.casefold() == wanted), None)
