"""Delivering the generated comment."""

from typing import Optional

import click

from jirac.core.platform import ClipboardTool
from jirac.logging import get_logger
from jirac.models import OutputMode

logger = get_logger("output")


class OutputSink:
    """Prints the comment or copies it to the clipboard."""

    def __init__(self, mode: OutputMode, clipboard: Optional[ClipboardTool] = None):
        if mode is OutputMode.CLIPBOARD and clipboard is None:
            raise ValueError("clipboard output needs a clipboard tool")
        self.mode = mode
        self.clipboard = clipboard

    def emit(self, text: str) -> None:
        if self.mode is OutputMode.STDOUT:
            click.echo(text, nl=False)
            return
        self.clipboard.copy(text)
        logger.info("Comment copied to the clipboard")
