"""Tests for the argument vectors passed to the warp binary."""

from warp_client.core.args import build_agent_run_args, build_profile_list_args, redact_args
from warp_client.core.enums import OutputFormat
from warp_client.core.types import RunOptions, ProfileListOptions


class TestAgentRunArgs:

    def test_prefix_only(self):
        assert build_agent_run_args(RunOptions()) == ["agent", "run"]

    def test_basic_flags(self):
        args = build_agent_run_args(RunOptions(prompt="hello world", debug=True, api_key="test-key"))
        assert args == ["agent", "run", "--api-key", "test-key", "--debug", "--prompt", "hello world"]

    def test_full_order(self):
        options = RunOptions(
            cwd="/work",
            environment="env-1",
            mcp_servers=["m1", "m2"],
            profile="prof",
            share=["team:view", "user@example.com:edit"],
            output_format=OutputFormat.JSON,
            saved_prompt="sp-1",
            prompt="do it",
            debug=True,
            api_key="key",
        )
        assert build_agent_run_args(options) == [
            "agent", "run",
            "--api-key", "key",
            "--debug",
            "--prompt", "do it",
            "--saved-prompt", "sp-1",
            "--output-format", "json",
            "--share", "team:view",
            "--share", "user@example.com:edit",
            "--profile", "prof",
            "--mcp-server", "m1",
            "--mcp-server", "m2",
            "--environment", "env-1",
            "--cwd", "/work",
        ]

    def test_output_format_as_plain_string(self):
        args = build_agent_run_args(RunOptions(output_format="text"))
        assert args == ["agent", "run", "--output-format", "text"]

    def test_deterministic(self):
        options = RunOptions(prompt="p", share=["a", "b"], api_key="k")
        assert build_agent_run_args(options) == build_agent_run_args(options)

    def test_api_key_before_prompt(self):
        args = build_agent_run_args(RunOptions(prompt="p", api_key="k"))
        assert args.index("--api-key") < args.index("--prompt")

    def test_empty_lists_emit_nothing(self):
        args = build_agent_run_args(RunOptions(share=[], mcp_servers=[]))
        assert args == ["agent", "run"]

    def test_falsy_values_omitted(self):
        args = build_agent_run_args(RunOptions(prompt="", debug=False, profile=""))
        assert args == ["agent", "run"]


class TestProfileListArgs:

    def test_prefix_only(self):
        assert build_profile_list_args(ProfileListOptions()) == ["agent", "profile", "list"]

    def test_flags(self):
        args = build_profile_list_args(ProfileListOptions(api_key="k", debug=True))
        assert args == ["agent", "profile", "list", "--api-key", "k", "--debug"]


class TestRedactArgs:

    def test_masks_api_key(self):
        args = ["agent", "run", "--api-key", "secret", "--prompt", "p"]
        assert redact_args(args) == ["agent", "run", "--api-key", "***", "--prompt", "p"]
        assert args[3] == "secret"

    def test_no_key(self):
        assert redact_args(["agent", "run"]) == ["agent", "run"]
