from __future__ import annotations
from typing import Optional
import logging

from warp_client.cmd_line.cmd_tools import CmdLineRunner
from warp_client.client.agent import AgentResource
from warp_client.client.profiles import ProfilesResource
from warp_client.core.config import DEFAULT_BINARY, load_config
from warp_client.core.logging_config import setup_logging
from warp_client.core.types import RunOptions
from warp_client.table.parser import TableGlyphs, DEFAULT_GLYPHS

logger = logging.getLogger(__name__)

class WarpClient:
    """
    Client for the `warp` command-line agent.

    Attributes:
        agent (AgentResource): Agent runs, blocking or streamed.
        profiles (ProfilesResource): Profile lookups.
    """
    def __init__(self, defaults: Optional[RunOptions] = None, binary: str = DEFAULT_BINARY,
                 runner: Optional[CmdLineRunner] = None, glyphs: TableGlyphs = DEFAULT_GLYPHS):
        self.defaults = defaults or RunOptions()
        self.binary = binary
        self._runner = runner or CmdLineRunner()
        self.agent = AgentResource(binary, self.defaults, self._runner)
        self.profiles = ProfilesResource(binary, self.defaults, self._runner, glyphs)
        logger.debug("Warp client initialized", extra={"binary": binary})

    @classmethod
    def from_config(cls, config_path: str, runner: Optional[CmdLineRunner] = None, configure_logging: bool = False) -> "WarpClient":
        """
        Creates a client from a YAML configuration file.

        Args:
            config_path (str): Path to the configuration file.
            runner (CmdLineRunner, optional): Process runner to use.
            configure_logging (bool, optional): Apply the logging section of the file. Defaults to False.

        Returns:
            WarpClient: The configured client.
        """
        config = load_config(config_path)
        if configure_logging:
            setup_logging(config.log_level, config.log_file)
        return cls(defaults=config.defaults, binary=config.binary, runner=runner)
