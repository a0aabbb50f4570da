from enum import Enum

class OutputFormat(Enum):
    JSON = "json"
    TEXT = "text"

class SubCommand(Enum):
    AGENT_RUN = "agent run"
    PROFILE_LIST = "agent profile list"

    def tokens(self) -> list[str]:
        return self.value.split(" ")
