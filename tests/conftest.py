"""Shared fixtures for jirac tests."""

import itertools
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from git import Actor, Repo

from jirac.models import Commit

USER = Actor("Test User", "test@example.com")
OTHER = Actor("Someone Else", "else@example.com")

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <modelVersion>4.0.0</modelVersion>
  <parent>
    <groupId>org.example</groupId>
    <artifactId>parent</artifactId>
    <version>9.9.9</version>
  </parent>
  <artifactId>demo</artifactId>
{fields}
</project>
"""

DEFAULT_FIELDS = """  <name>Demo Project</name>
  <version>1.2.0-SNAPSHOT</version>
  <scm>
    <connection>scm:git:https://github.com/example/demo.git</connection>
  </scm>"""


def write_pom(project_path: Path, fields: str = DEFAULT_FIELDS) -> Path:
    pom = project_path / "pom.xml"
    pom.write_text(POM_TEMPLATE.format(fields=fields), encoding="utf-8")
    return pom


class GitProject:
    """A real git project with a bare remote, used by integration tests."""

    def __init__(self, root: Path, remote_path: Path):
        self.root = root
        self.remote_path = remote_path
        self.repo = Repo.init(root)
        with self.repo.config_writer() as config:
            config.set_value("user", "name", USER.name)
            config.set_value("user", "email", USER.email)
        self._counter = itertools.count()
        self._start = int(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc).timestamp())

    def commit(self, message: str, author: Actor = USER) -> str:
        n = next(self._counter)
        path = self.root / "CHANGES.txt"
        with path.open("a", encoding="utf-8") as f:
            f.write(f"change {n}\n")
        self.repo.index.add(["CHANGES.txt"])
        date = f"{self._start + 60 * n} +0000"
        commit = self.repo.index.commit(
            message, author=author, committer=author, author_date=date, commit_date=date
        )
        return commit.hexsha

    def push(self, branch: str = "main") -> None:
        if branch not in [head.name for head in self.repo.heads]:
            self.repo.git.branch("-M", branch)
        if "origin" not in [remote.name for remote in self.repo.remotes]:
            self.repo.create_remote("origin", str(self.remote_path))
        self.repo.git.push("-u", "origin", branch)


@pytest.fixture
def git_project(tmp_path):
    """A git repository holding a pom.xml, with a bare remote next to it."""
    remote_path = tmp_path / "remote.git"
    Repo.init(remote_path, bare=True)
    root = tmp_path / "project"
    root.mkdir()
    project = GitProject(root, remote_path)
    write_pom(root)
    project.repo.index.add(["pom.xml"])
    return project


@pytest.fixture
def make_commit():
    """Factory for in-memory commits; position 0 is the newest."""

    def _make(position: int, message: str, author: Actor = USER) -> Commit:
        hexsha = f"{position:02d}".ljust(40, "a")
        return Commit.from_message(
            message,
            hexsha=hexsha,
            short_sha=hexsha[:7],
            author_name=author.name,
            author_email=author.email,
            committer_name=author.name,
            committer_email=author.email,
            committed_date=datetime(2024, 1, 1, tzinfo=timezone.utc) - timedelta(hours=position),
            log_position=position,
        )

    return _make


class FakeRepository:
    """Stands in for GitRepository over a fixed newest-first history."""

    def __init__(self, history, upstream=None, remotes=(), refs=()):
        self.history = list(history)
        self.upstream = upstream
        self.remotes = list(remotes)
        self.refs = set(refs)
        self.calls = []

    def commits(self, rev, author, max_count=None):
        self.calls.append((rev, max_count))
        name, email = author
        mine = [c for c in self.history if c.is_authored_by(name, email)]
        return mine if max_count is None else mine[:max_count]

    def upstream_branch(self):
        return self.upstream

    def remote_branches(self):
        return list(self.remotes)

    def has_ref(self, ref):
        return ref in self.refs


@pytest.fixture
def fake_repository():
    return FakeRepository
