"""Platform dependent external tools."""

import shutil
import subprocess
import sys
from typing import Iterable, Optional, Tuple

from jirac.errors import DependencyMissingError, JiracError
from jirac.logging import get_logger

logger = get_logger("platform")


class ClipboardTool:
    """A command line program that copies its standard input to the clipboard."""

    executable = ""
    arguments: Tuple[str, ...] = ()

    def detect(self) -> bool:
        return shutil.which(self.executable) is not None

    def copy(self, text: str) -> None:
        cmd = [self.executable, *self.arguments]
        try:
            subprocess.run(cmd, input=text, text=True, check=True, capture_output=True)  # noqa: S603
        except (OSError, subprocess.CalledProcessError) as e:
            raise JiracError(f"Failed to copy to the clipboard with {self.executable}: {e}") from e


class PbcopyClipboard(ClipboardTool):
    executable = "pbcopy"


class WindowsClipboard(ClipboardTool):
    executable = "clip"


class XclipClipboard(ClipboardTool):
    executable = "xclip"
    arguments = ("-selection", "clipboard")


def select_clipboard(platform: Optional[str] = None) -> ClipboardTool:
    """Pick the clipboard tool for the running platform."""
    platform = platform or sys.platform
    if platform == "darwin":
        return PbcopyClipboard()
    if platform.startswith(("win32", "cygwin", "msys")):
        return WindowsClipboard()
    return XclipClipboard()


def require_tools(names: Iterable[str]) -> None:
    """Fail with every missing executable named at once."""
    missing = [name for name in names if shutil.which(name) is None]
    if missing:
        raise DependencyMissingError(missing)
    logger.debug("Found required tools")
