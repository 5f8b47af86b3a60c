"""Read-only access to the project's git repository."""

import os
from pathlib import Path
from typing import List, Optional, Tuple

import git
from git import Repo

from jirac.errors import IdentityMissingError, JiracError, ProjectNotFoundError
from jirac.logging import get_logger
from jirac.models import BranchRef, Commit

logger = get_logger("repository")

DEFAULT_EDITOR = "vi"


class GitRepository:
    """Wraps a GitPython ``Repo`` with the queries jirac needs."""

    def __init__(self, project_root: Path):
        self.project_root = Path(project_root)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it on first use."""
        if self._repo is None:
            try:
                self._repo = Repo(self.project_root)
            except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
                raise ProjectNotFoundError(f"Not a git repository: {self.project_root}") from e
        return self._repo

    def user_identity(self) -> Tuple[str, str]:
        """Return the configured ``(user.name, user.email)``."""
        reader = self.repo.config_reader()
        name = str(reader.get_value("user", "name", default="")).strip()
        email = str(reader.get_value("user", "email", default="")).strip()
        if not name and not email:
            raise IdentityMissingError("git user.name and user.email are not configured")
        logger.debug("Current identity: %s <%s>", name, email)
        return name, email

    def upstream_branch(self) -> Optional[BranchRef]:
        """Return the tracking branch of the checked out branch, if any."""
        try:
            branch = self.repo.active_branch
        except TypeError:
            logger.debug("HEAD is detached, no tracking branch")
            return None
        tracking = branch.tracking_branch()
        if tracking is None:
            return None
        return BranchRef(ref=tracking.name, name=tracking.remote_head)

    def remote_branches(self) -> List[str]:
        """List remote branches as ``<remote>/<branch>``."""
        names = []
        for remote in self.repo.remotes:
            for ref in remote.refs:
                if ref.remote_head == "HEAD":
                    continue
                names.append(ref.name)
        return sorted(names)

    def has_ref(self, ref: str) -> bool:
        try:
            self.repo.git.rev_parse("--verify", "--quiet", f"{ref}^{{commit}}")
        except git.GitCommandError:
            return False
        return True

    def commits(
        self, rev: str, author: Tuple[str, str], max_count: Optional[int] = None
    ) -> List[Commit]:
        """Return the commits of ``author`` reachable from ``rev``, newest first."""
        name, email = author
        result: List[Commit] = []
        if max_count == 0:
            return result
        try:
            for commit in self.repo.iter_commits(rev):
                if not _is_authored_by(commit, name, email):
                    continue
                result.append(_to_commit(commit, position=len(result)))
                if max_count is not None and len(result) >= max_count:
                    break
        except git.GitCommandError as e:
            raise JiracError(f"Failed to read the history of {rev}: {e.stderr.strip() or e}") from e
        logger.debug("Read %d commit(s) of %s on %s", len(result), name or email, rev)
        return result

    def editor(self) -> str:
        """Resolve the editor the way git does."""
        env_editor = os.environ.get("GIT_EDITOR")
        if env_editor:
            return env_editor
        configured = self.repo.config_reader().get_value("core", "editor", default="")
        if configured:
            return str(configured)
        return os.environ.get("VISUAL") or os.environ.get("EDITOR") or DEFAULT_EDITOR


def _is_authored_by(commit: git.Commit, name: str, email: str) -> bool:
    people = (commit.author, commit.committer)
    return bool(
        (name and any(person.name == name for person in people))
        or (email and any(person.email == email for person in people))
    )


def _to_commit(commit: git.Commit, position: int) -> Commit:
    message = commit.message
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return Commit.from_message(
        message,
        hexsha=commit.hexsha,
        short_sha=commit.hexsha[:7],
        author_name=commit.author.name or "",
        author_email=commit.author.email or "",
        committer_name=commit.committer.name or "",
        committer_email=commit.committer.email or "",
        committed_date=commit.committed_datetime,
        log_position=position,
    )
