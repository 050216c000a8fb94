"""
Tests for the command line entry point and configuration
"""

import io

import pytest

from pyshell.cli import main
from pyshell.config import DEFAULT_PROMPT, Config
from pyshell.linesource import complete_path, interactive_lines, stream_lines
from pyshell.shell import Shell


class TestMain:

    def test_command_option(self, workdir, capfd):
        assert main(["-c", "echo hi ; echo there"]) == 0
        assert capfd.readouterr().out == "hi\nthere\n"

    def test_failing_command_still_exits_zero(self, workdir, capfd):
        assert main(["-c", "pyshell-no-such-program"]) == 0
        assert capfd.readouterr().err == "Invalid Command\n"

    def test_exit_builtin(self, workdir):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", "exit"])
        assert excinfo.value.code == 0

    def test_reads_lines_until_end_of_input(self, workdir, capfd, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("echo one\n\necho two\n"))
        assert main([]) == 0
        assert capfd.readouterr().out == "one\ntwo\n"


class TestConfig:

    def test_defaults(self, monkeypatch):
        for key in ("PYSHELL_PROMPT", "PYSHELL_HISTORY_SIZE", "PYSHELL_MAX_ARGS", "PYSHELL_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        config = Config()
        assert config.prompt == DEFAULT_PROMPT
        assert config.history_size == 2048
        assert config.max_args == 100
        assert config.log_level == "WARNING"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("PYSHELL_HISTORY_SIZE", "5")
        monkeypatch.setenv("PYSHELL_LOG_LEVEL", "debug")
        config = Config()
        assert config.history_size == 5
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["abc", "0", "-4"])
    def test_invalid_integers_fall_back(self, monkeypatch, value):
        monkeypatch.setenv("PYSHELL_MAX_ARGS", value)
        assert Config().max_args == 100

    def test_render_prompt(self, workdir, monkeypatch):
        monkeypatch.setenv("PYSHELL_PROMPT", "{cwd} > ")
        assert Config().render_prompt().endswith(f"{workdir.name} > ")

    def test_render_prompt_without_placeholder(self, monkeypatch):
        monkeypatch.setenv("PYSHELL_PROMPT", "MTL458 > ")
        assert Config().render_prompt() == "MTL458 > "


class TestLineSources:

    def test_stream_lines_strips_newlines(self):
        assert list(stream_lines(io.StringIO("a\nb c\n"))) == ["a", "b c"]

    def test_complete_path(self, workdir):
        (workdir / "alpha.txt").write_text("")
        (workdir / "alpine").mkdir()
        assert complete_path("alp", 0) == "alpha.txt"
        assert complete_path("alp", 1) == "alpine"
        assert complete_path("alp", 2) is None

    @pytest.mark.parametrize("stop", [EOFError, KeyboardInterrupt])
    def test_interactive_lines_stop_at_end_of_input(self, workdir, capfd, monkeypatch, stop):
        answers = iter(["echo one"])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            try:
                return next(answers)
            except StopIteration:
                raise stop()

        monkeypatch.setattr("pyshell.linesource.install_completion", lambda: None)
        monkeypatch.setattr("builtins.input", fake_input)
        assert Shell(Config()).loop(interactive_lines(lambda: "> ")) == 0
        assert prompts == ["> ", "> "]
        assert capfd.readouterr().out == "one\n\n"
