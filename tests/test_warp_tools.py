"""Tests for the warp agent tool provider."""

import json
from unittest.mock import MagicMock

import jsonschema
import pytest

from warp_client.client.warp import WarpClient
from warp_client.cmd_line.cmd_tools import CmdLineRunner
from warp_client.core.tools import ToolProvider, throw_if_not_toolprovider
from warp_client.core.types import ExecutionResult
from warp_client.tools.warp_tools import WarpTools


def _tools(stdout="done", stderr="", exit_code=0):
    runner = MagicMock(spec=CmdLineRunner)
    runner.execute_cmd.return_value = ExecutionResult(stdout, stderr, exit_code)
    return WarpTools(WarpClient(runner=runner)), runner


def _by_name(provider):
    return {tool.meta.name: tool for tool in provider.get_tools()}


class TestWarpTools:

    def test_is_tool_provider(self):
        provider, _ = _tools()
        throw_if_not_toolprovider(provider)
        with pytest.raises(RuntimeError):
            throw_if_not_toolprovider(object())

    def test_tool_names(self):
        provider, _ = _tools()
        assert set(_by_name(provider)) == {
            "WarpTools.run_agent",
            "WarpTools.start_agent",
            "WarpTools.monitor_agent",
            "WarpTools.stop_agent",
            "WarpTools.list_profiles",
        }

    def test_schema(self):
        provider, _ = _tools()
        schema = json.loads(_by_name(provider)["WarpTools.run_agent"].schema())
        params = schema["function"]["parameters"]
        assert schema["function"]["name"] == "WarpTools.run_agent"
        assert params["required"] == ["prompt"]
        assert params["properties"]["prompt"] == {"type": "string"}
        assert params["properties"]["profile"]["default"] is None

    def test_run_agent(self):
        provider, runner = _tools(stdout="summary written")
        output = _by_name(provider)["WarpTools.run_agent"](prompt="summarize", profile="team-1")
        assert "summary written" in output
        assert "Exit code: 0" in output
        assert runner.execute_cmd.call_args.args[1] == ["agent", "run", "--prompt", "summarize", "--profile", "team-1"]

    def test_arguments_validated(self):
        provider, runner = _tools()
        with pytest.raises(jsonschema.ValidationError):
            _by_name(provider)["WarpTools.run_agent"](prompt=5)
        runner.execute_cmd.assert_not_called()

    def test_list_profiles(self):
        provider, _ = _tools(stdout="│ team-1 ┆ Default │\n")
        assert _by_name(provider)["WarpTools.list_profiles"]() == "team-1: Default"

    def test_list_profiles_error(self):
        provider, _ = _tools(stdout="", stderr="unauthorized", exit_code=1)
        assert "unauthorized" in _by_name(provider)["WarpTools.list_profiles"]()

    def test_monitor_without_agent(self):
        provider, _ = _tools()
        assert _by_name(provider)["WarpTools.monitor_agent"]() == "Error: No agent started."

    def test_start_and_monitor(self):
        provider, runner = _tools()
        handle = MagicMock()
        handle.is_running.return_value = False
        handle.read_all.side_effect = ["line 1\n", ""]
        handle.exit_code = 0
        runner.monitor_cmd.return_value = handle

        assert _by_name(provider)["WarpTools.start_agent"](prompt="go") == "Agent started in background mode."
        output = _by_name(provider)["WarpTools.monitor_agent"](timeout=1.0)
        assert output == "Agent finished with code 0\nOutput:\nline 1\n"

    def test_start_refused_while_running(self):
        provider, runner = _tools()
        handle = MagicMock()
        handle.is_running.return_value = True
        runner.monitor_cmd.return_value = handle

        start = _by_name(provider)["WarpTools.start_agent"]
        start(prompt="go")
        assert start(prompt="again").startswith("Error")
        assert runner.monitor_cmd.call_count == 1
