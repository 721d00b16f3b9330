"""Tests for the command-line entry point."""

import pytest
from jsinterop import cli

DOCUMENTED = "/** @returns {string} */\nexport function version() {}\n"


class TestArguments:
    def test_input_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JSINTEROP_NAMESPACE", raising=False)
        args = cli.build_parser().parse_args(["-i", "*.js"])
        assert args.input == "*.js"
        assert args.watch is False
        assert args.namespace == "BlazorApp.JsInterop"

    def test_short_and_long_flags(self):
        args = cli.build_parser().parse_args(
            ["--input", "js/**/*.js", "-w", "-n", "My.Interop"]
        )
        assert args.watch is True
        assert args.namespace == "My.Interop"


class TestMain:
    def test_generates_files(self, tmp_path, write_js, monkeypatch):
        write_js("app.js", DOCUMENTED)
        monkeypatch.chdir(tmp_path)
        assert cli.main(["-i", "*.js", "-n", "Cli.Test"]) == 0
        code = (tmp_path / "app.cs").read_text(encoding="utf-8")
        assert "namespace Cli.Test;" in code
        assert "public async Task<string> VersionAsync()" in code

    def test_invalid_namespace(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["-i", "*.js", "-n", "not a namespace"]) == 1

    def test_invalid_env_namespace_overridden_by_flag(self, tmp_path, write_js, monkeypatch):
        """A bad $JSINTEROP_NAMESPACE does not break an explicit -n."""
        write_js("app.js", DOCUMENTED)
        monkeypatch.setenv("JSINTEROP_NAMESPACE", "not valid")
        monkeypatch.chdir(tmp_path)
        assert cli.main(["-i", "*.js", "-n", "Good.Name"]) == 0
        assert "namespace Good.Name;" in (tmp_path / "app.cs").read_text(encoding="utf-8")

    def test_invalid_env_namespace_without_flag(self, tmp_path, monkeypatch):
        monkeypatch.setenv("JSINTEROP_NAMESPACE", "not valid")
        monkeypatch.chdir(tmp_path)
        assert cli.main(["-i", "*.js"]) == 1

    def test_failure_exit_code(self, tmp_path, monkeypatch):
        (tmp_path / "broken.js").write_bytes(b"\xff\xfe\xc3")
        monkeypatch.chdir(tmp_path)
        assert cli.main(["-i", "*.js"]) == 1

    def test_watch_mode_dispatch(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            cli, "watch_and_generate", lambda pattern, config: calls.append(pattern) or 0
        )
        assert cli.main(["-i", "src/*.js", "--watch"]) == 0
        assert calls == ["src/*.js"]
