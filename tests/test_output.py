"""Tests for output delivery and platform tools."""

import subprocess

import pytest

from jirac.core import platform
from jirac.core.output import OutputSink
from jirac.core.platform import (
    ClipboardTool,
    PbcopyClipboard,
    WindowsClipboard,
    XclipClipboard,
    require_tools,
    select_clipboard,
)
from jirac.errors import DependencyMissingError, JiracError
from jirac.models import OutputMode


class RecordingClipboard(ClipboardTool):
    executable = "recorder"

    def __init__(self):
        self.copied = []

    def copy(self, text):
        self.copied.append(text)


def test_stdout_sink(capsys):
    OutputSink(OutputMode.STDOUT).emit("*Project:* Demo\n")
    assert capsys.readouterr().out == "*Project:* Demo\n"


def test_clipboard_sink(capsys):
    clipboard = RecordingClipboard()
    OutputSink(OutputMode.CLIPBOARD, clipboard=clipboard).emit("text\n")
    assert clipboard.copied == ["text\n"]
    assert capsys.readouterr().out == ""


def test_clipboard_sink_needs_a_tool():
    with pytest.raises(ValueError):
        OutputSink(OutputMode.CLIPBOARD)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("darwin", PbcopyClipboard),
        ("win32", WindowsClipboard),
        ("cygwin", WindowsClipboard),
        ("msys", WindowsClipboard),
        ("linux", XclipClipboard),
        ("freebsd13", XclipClipboard),
    ],
)
def test_select_clipboard(name, expected):
    assert isinstance(select_clipboard(name), expected)


def test_clipboard_copy_pipes_text(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs["input"]))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(platform.subprocess, "run", fake_run)
    XclipClipboard().copy("hello")
    assert calls == [(["xclip", "-selection", "clipboard"], "hello")]


def test_clipboard_copy_failure(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(platform.subprocess, "run", fake_run)
    with pytest.raises(JiracError, match="pbcopy"):
        PbcopyClipboard().copy("hello")


def test_require_tools_lists_every_missing_tool(monkeypatch):
    monkeypatch.setattr(platform.shutil, "which", lambda name: "/usr/bin/git" if name == "git" else None)

    require_tools(["git"])
    with pytest.raises(DependencyMissingError) as excinfo:
        require_tools(["git", "xclip", "xmlstarlet"])
    assert excinfo.value.tools == ["xclip", "xmlstarlet"]
    assert excinfo.value.exit_code != 0


def test_clipboard_arguments_are_shared_safely():
    assert isinstance(ClipboardTool.arguments, tuple)
    assert XclipClipboard.arguments == ("-selection", "clipboard")
    assert PbcopyClipboard.arguments == ()
