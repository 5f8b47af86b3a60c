"""The comment produced for the issue tracker."""

from typing import List, Optional, Tuple

from pydantic import BaseModel


class CommentEntry(BaseModel):
    """One commit as it appears in the comment."""

    subject: str
    link: Optional[str] = None
    body: str = ""

    model_config = {"frozen": True}

    def lines(self) -> List[str]:
        """Render the entry as comment lines, without separators."""
        lines = [f"*{self.subject}*"]
        if self.link:
            lines.append(self.link)
        if self.body:
            lines.extend(self.body.split("\n"))
        return lines


class CommentDocument(BaseModel):
    """Header plus commit entries, oldest first."""

    project: str
    branch: str
    version: str
    entries: Tuple[CommentEntry, ...] = ()

    model_config = {"frozen": True}

    def render(self) -> str:
        """Render the comment as Jira wiki markup."""
        lines = [
            f"*Project:* {self.project}",
            f"*Branch:* {self.branch}",
            f"*Version:* {self.version}",
        ]
        for entry in self.entries:
            lines.append("")
            lines.extend(entry.lines())
        return "\n".join(lines) + "\n"
