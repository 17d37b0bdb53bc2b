"""Tests for output module."""

import io

from srap.output import HELP_TEXT, Console, print_help


def make_console(no_color=False, verbose=False):
    stream = io.StringIO()
    return Console(no_color=no_color, verbose=verbose, stream=stream), stream


class TestHelp:
    """Tests for print_help() function."""

    def test_print_help(self, capsys):
        """The usage text lists every option."""
        print_help()

        out = capsys.readouterr().out
        assert out == HELP_TEXT + "\n"
        assert "Usage: srap [options] <line to append>" in out
        for flag in ("--all", "--dry-run", "--file", "--help", "--no-color", "--verbose"):
            assert flag in out


class TestConsole:
    """Tests for Console."""

    def test_dry_run_colored(self):
        """The dry-run notice is red and bold."""
        console, stream = make_console()

        console.dry_run_notice()

        assert stream.getvalue() == "\x1b[31;1mDoing a dry run...\x1b[0m\n"

    def test_dry_run_plain(self):
        """No-color output has no escape codes."""
        console, stream = make_console(no_color=True)

        console.dry_run_notice()

        assert stream.getvalue() == "Doing a dry run...\n"

    def test_not_found_colored(self):
        """The path is cyan and "not found" red."""
        console, stream = make_console()

        console.not_found("/home/test/.zshrc")

        assert stream.getvalue() == "\x1b[36m/home/test/.zshrc\x1b[0m \x1b[31;1mnot found\x1b[0m\n"

    def test_not_found_plain(self):
        """Plain not-found notice."""
        console, stream = make_console(no_color=True)

        console.not_found("/home/test/.zshrc")

        assert stream.getvalue() == "/home/test/.zshrc not found\n"

    def test_appending_colored(self):
        """Appending notice with highlighted words and path."""
        console, stream = make_console()

        console.appending("\nexport Y=2", "/home/test/.bashrc")

        assert stream.getvalue() == (
            "\x1b[35;1mAppending\x1b[0m \"export Y=2\" "
            "\x1b[35;1mto\x1b[0m \x1b[36m/home/test/.bashrc\x1b[0m\n"
        )

    def test_appending_plain(self):
        """The leading newline is dropped from the shown line."""
        console, stream = make_console(no_color=True)

        console.appending('\nalias ll="ls"', "/home/test/.bashrc")

        assert stream.getvalue() == 'Appending "alias ll="ls"" to /home/test/.bashrc\n'

    def test_success(self):
        """Success is green, or plain without color."""
        colored, colored_stream = make_console()
        plain, plain_stream = make_console(no_color=True)

        colored.success()
        plain.success()

        assert colored_stream.getvalue().startswith("\x1b[32m")
        assert plain_stream.getvalue() == "Now source the config file and you're all ready to go! :3\n"

    def test_debug_only_when_verbose(self):
        """Diagnostics only show in verbose mode."""
        quiet, quiet_stream = make_console()
        loud, loud_stream = make_console(verbose=True)

        quiet.debug("SHELL: /bin/zsh")
        loud.debug("SHELL: /bin/zsh")

        assert quiet_stream.getvalue() == ""
        assert loud_stream.getvalue() == "SHELL: /bin/zsh\n"

    def test_defaults_to_stdout(self, capsys):
        """Without a stream, output goes to stdout."""
        Console(no_color=True).echo("hello")

        assert capsys.readouterr().out == "hello\n"
