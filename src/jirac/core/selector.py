"""Picking the commits that go into the comment."""

import re
from typing import List, Optional, Sequence, Tuple

import click

from jirac.errors import NoMatchError, NoPushedCommitError, UsageError
from jirac.logging import get_logger
from jirac.models import BranchRef, Commit, SelectionCriteria

logger = get_logger("selector")

DEFAULT_CANDIDATE_LIMIT = 10

_MARKED_LINE = re.compile(r"^\s*\[\s*[xX*]\s*\]\s+([0-9a-fA-F]{4,40})\b")

EDITOR_HELP = """\
# Mark the commits to include in the comment by replacing [ ] with [x].
# Commits are listed newest first. Lines starting with '#' are ignored.
# Leaving every commit unmarked asks again.
"""


class SelectionPrompt:
    """Lets the user pick commits out of a candidate list.

    ``choose`` returns the hashes of the chosen commits. An empty list
    means nothing was picked and the caller should ask again.
    """

    def choose(self, candidates: Sequence[Commit]) -> List[str]:
        raise NotImplementedError


class EditorSelectionPrompt(SelectionPrompt):
    """Opens the candidates in a text editor for marking."""

    def __init__(self, editor: Optional[str] = None):
        self.editor = editor

    def render(self, candidates: Sequence[Commit]) -> str:
        lines = [f"[ ] {commit.short_sha} {commit.subject}" for commit in candidates]
        return EDITOR_HELP + "\n" + "\n".join(lines) + "\n"

    def choose(self, candidates: Sequence[Commit]) -> List[str]:
        # click.edit owns the scratch file and removes it once the editor exits
        edited = click.edit(
            self.render(candidates), editor=self.editor, extension=".txt", require_save=True
        )
        if edited is None:
            return []
        return parse_marked(edited, candidates)


def parse_marked(text: str, candidates: Sequence[Commit]) -> List[str]:
    """Return the full hashes of the candidates marked in ``text``."""
    chosen: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith("#"):
            continue
        match = _MARKED_LINE.match(line)
        if not match:
            continue
        prefix = match.group(1).lower()
        for commit in candidates:
            if commit.hexsha.startswith(prefix) and commit.hexsha not in chosen:
                chosen.append(commit.hexsha)
                break
        else:
            logger.warning("Ignoring unknown commit %s", prefix)
    return chosen


def compile_pattern(pattern: str) -> "re.Pattern[str]":
    try:
        return re.compile(pattern)
    except re.error as e:
        raise UsageError(f"Invalid --grep pattern {pattern!r}: {e}") from e


class CommitSelector:
    """Selects commits of the current user on a branch."""

    def __init__(
        self,
        repository,
        prompt: Optional[SelectionPrompt] = None,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
    ):
        self.repository = repository
        self.prompt = prompt
        self.candidate_limit = candidate_limit

    def select(
        self, author: Tuple[str, str], branch: BranchRef, criteria: SelectionCriteria
    ) -> List[Commit]:
        """Return the selected commits, newest first."""
        if not self.repository.commits(branch.ref, author, max_count=1):
            raise NoPushedCommitError(
                f"No commit by {author[0] or author[1]} found on {branch.ref}"
            )

        if criteria.is_interactive:
            return self._select_interactively(author, branch)

        if criteria.count is not None:
            commits = self.repository.commits(branch.ref, author, max_count=criteria.count)
        else:
            commits = self.repository.commits(branch.ref, author)

        if criteria.pattern is not None:
            regex = compile_pattern(criteria.pattern)
            # the pattern only narrows what the count already picked
            commits = [commit for commit in commits if regex.search(commit.message)]

        if not commits:
            raise NoMatchError(count=criteria.count, pattern=criteria.pattern)

        logger.info("Selected %d commit(s)", len(commits))
        return commits

    def _select_interactively(self, author: Tuple[str, str], branch: BranchRef) -> List[Commit]:
        if self.prompt is None:
            raise UsageError("Interactive selection is not available, use --number or --grep")

        candidates = self.repository.commits(branch.ref, author, max_count=self.candidate_limit)
        while True:
            chosen = set(self.prompt.choose(candidates))
            selected = [commit for commit in candidates if commit.hexsha in chosen]
            if selected:
                logger.info("Selected %d commit(s)", len(selected))
                return selected
            logger.warning("No commit selected, please mark at least one")
