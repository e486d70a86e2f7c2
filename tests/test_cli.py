"""
Tests for the command line entry point.
"""

import logging

import pytest
from pydantic import ValidationError

from conftest import FakeTransport, json_response
from dxsh import main as cli
from dxsh.analyzers import github_analyzer


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_transport(monkeypatch):
    """Route every resolver built by the CLI to a fake provider."""
    transport = FakeTransport(json_response({"tag_name": "v3.1.0", "assets": []}))
    monkeypatch.setattr(github_analyzer, "UrllibTransport", lambda timeout: transport)
    return transport


class TestCli:

    def test_list(self, capsys):
        assert cli.main(["list"]) == 0
        assert capsys.readouterr().out.split() == [
            "kubectl", "terraform", "helm", "node", "docker-compose"
        ]

    def test_generate_prints_script(self, capsys, fake_transport):
        assert cli.main(["--log-level", "WARNING", "generate", "helm"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("#!/usr/bin/env bash")
        assert "https://get.helm.sh/helm-v3.1.0-${OS}-${ARCH}.tar.gz" in out

    def test_generate_unsupported_tool(self, capsys, fake_transport):
        assert cli.main(["generate", "emacs"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Tool 'emacs' is not supported" in captured.err
        assert fake_transport.calls == []

    def test_serve_overrides(self):
        args = cli.parse_arguments(["serve", "--host", "0.0.0.0", "--port", "9000"])
        settings = cli.load_settings(args)

        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 9000

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("DXSH_SCRIPT__INSTALL_DIR", "/opt/bin")
        monkeypatch.setenv("DXSH_GITHUB__API_BASE", "https://ghe.example.com/api/v3/")

        settings = cli.load_settings(cli.parse_arguments(["list"]))

        assert settings.script.install_dir == "/opt/bin"
        assert settings.github.api_base == "https://ghe.example.com/api/v3"

    def test_logging_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("DXSH_LOGGING__LEVEL", "debug")

        settings = cli.load_settings(cli.parse_arguments(["list"]))

        assert settings.logging.level == "DEBUG"

    def test_rejects_unknown_logging_level(self, monkeypatch):
        monkeypatch.setenv("DXSH_LOGGING__LEVEL", "LOUD")

        with pytest.raises(ValidationError, match="Unknown logging level"):
            cli.load_settings(cli.parse_arguments(["list"]))

    def test_logs_to_file_when_configured(self, monkeypatch, tmp_path, fake_transport):
        log_file = tmp_path / "logs" / "dxsh.log"
        monkeypatch.setenv("DXSH_LOGGING__FILE_PATH", str(log_file))

        assert cli.main(["generate", "helm"]) == 0

        assert "Fetching latest release for helm/helm" in log_file.read_text()
