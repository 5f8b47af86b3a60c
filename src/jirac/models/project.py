"""Project level models: descriptor metadata and branch references."""

from typing import Optional

from pydantic import BaseModel, field_validator


class ProjectMetadata(BaseModel):
    """Fields read from the Maven project descriptor."""

    name: str
    version: str
    scm_url: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("name", "version")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @property
    def has_links(self) -> bool:
        return bool(self.scm_url)

    def commit_url(self, hexsha: str) -> Optional[str]:
        """Link to a commit on the hosting service, if the project has one."""
        if not self.scm_url:
            return None
        return f"{self.scm_url.rstrip('/')}/commit/{hexsha}"


class BranchRef(BaseModel):
    """A branch to read commits from."""

    ref: str  # revision handed to git, e.g. origin/main
    name: str  # shown in the comment header, e.g. main

    model_config = {"frozen": True}

    @classmethod
    def from_remote_ref(cls, ref: str) -> "BranchRef":
        """Build from ``<remote>/<branch>``; the remote is dropped from the name."""
        _, sep, branch = ref.partition("/")
        return cls(ref=ref, name=branch if sep and branch else ref)

    def __str__(self) -> str:
        return self.name
