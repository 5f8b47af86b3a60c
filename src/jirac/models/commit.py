"""Commit model for jirac."""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel


def split_message(message: str) -> Tuple[str, str]:
    """Split a raw commit message into its subject and body.

    The subject is the first paragraph folded onto one line, the way
    ``git log --format=%s`` shows it. The body keeps every remaining
    line, blank lines included, minus trailing whitespace and the blank
    lines surrounding it.
    """
    lines = [line.rstrip() for line in message.replace("\r\n", "\n").split("\n")]

    while lines and not lines[0].strip():
        lines.pop(0)

    subject_lines = []
    while lines and lines[0].strip():
        subject_lines.append(lines.pop(0).strip())

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return " ".join(subject_lines), "\n".join(lines)


class Commit(BaseModel):
    """A commit read from the project's git history."""

    hexsha: str
    short_sha: str
    author_name: str
    author_email: str
    committer_name: str
    committer_email: str
    committed_date: datetime
    subject: str
    body: str = ""
    log_position: int = 0  # 0 is the newest commit of the listing

    model_config = {"frozen": True}

    @classmethod
    def from_message(cls, message: str, **fields) -> "Commit":
        """Build a commit, deriving subject and body from ``message``."""
        subject, body = split_message(message)
        return cls(subject=subject, body=body, **fields)

    @property
    def message(self) -> str:
        if self.body:
            return f"{self.subject}\n\n{self.body}"
        return self.subject

    def is_authored_by(self, name: str, email: str) -> bool:
        """Check whether the commit belongs to the given identity."""
        return bool(
            (name and name in (self.author_name, self.committer_name))
            or (email and email in (self.author_email, self.committer_email))
        )
