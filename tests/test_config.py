"""Tests for loading client configuration from YAML."""

import pytest

from warp_client.core.config import ClientConfig, load_config
from warp_client.core.enums import OutputFormat
from warp_client.core.types import RunOptions


def _write(tmp_path, text):
    path = tmp_path / "warp.yaml"
    path.write_text(text)
    return str(path)


class TestLoadConfig:

    def test_full(self, tmp_path):
        path = _write(tmp_path, """
binary: warp-preview
defaults:
  api_key: key
  debug: true
  output_format: json
  share: [team:view]
  mcp_servers: [s1, s2]
logging:
  level: DEBUG
  file: warp.log
""")
        config = load_config(path)
        assert config.binary == "warp-preview"
        assert config.defaults == RunOptions(
            api_key="key",
            debug=True,
            output_format=OutputFormat.JSON,
            share=["team:view"],
            mcp_servers=["s1", "s2"],
        )
        assert config.log_level == "DEBUG"
        assert config.log_file == "warp.log"

    def test_empty_file(self, tmp_path):
        assert load_config(_write(tmp_path, "")) == ClientConfig()

    def test_relative_cwd_resolved(self, tmp_path):
        config = load_config(_write(tmp_path, "defaults:\n  cwd: project\n"))
        assert config.defaults.cwd == str(tmp_path / "project")

    def test_absolute_cwd_kept(self, tmp_path):
        config = load_config(_write(tmp_path, "defaults:\n  cwd: /srv/project\n"))
        assert config.defaults.cwd == "/srv/project"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unknown_option(self, tmp_path):
        with pytest.raises(ValueError, match="apiKey"):
            load_config(_write(tmp_path, "defaults:\n  apiKey: k\n"))

    def test_share_must_be_list(self, tmp_path):
        with pytest.raises(ValueError, match="share"):
            load_config(_write(tmp_path, "defaults:\n  share: team:view\n"))

    def test_invalid_output_format(self, tmp_path):
        with pytest.raises(ValueError, match="output_format"):
            load_config(_write(tmp_path, "defaults:\n  output_format: xml\n"))

    def test_not_a_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="mapping"):
            load_config(_write(tmp_path, "- a\n- b\n"))
