"""Resolving the branch whose commits are summarised."""

from typing import Callable, Optional

import click

from jirac.errors import NoUpstreamError
from jirac.logging import get_logger
from jirac.models import BranchRef

logger = get_logger("branch")


def _prompt_for_branch(text: str) -> str:
    return click.prompt(text, default="", show_default=False, err=True)


class BranchResolver:
    """Finds the upstream branch, asking the user when there is none."""

    def __init__(
        self,
        repository,
        interactive: bool = True,
        prompt: Optional[Callable[[str], str]] = None,
    ):
        self.repository = repository
        self.interactive = interactive
        self.prompt = prompt or _prompt_for_branch

    def resolve(self) -> BranchRef:
        upstream = self.repository.upstream_branch()
        if upstream is not None:
            logger.info("Using upstream branch %s", upstream.ref)
            return upstream

        if not self.interactive:
            raise NoUpstreamError(
                "The current branch has no upstream branch; "
                "set one with 'git branch --set-upstream-to' to use --standard-output"
            )

        branches = self.repository.remote_branches()

        logger.warning("The current branch has no upstream branch")
        click.echo("Remote branches:", err=True)
        if not branches:
            click.echo("  (no remote branches)", err=True)
        for name in branches:
            click.echo(f"  {name}", err=True)

        while True:
            choice = self.prompt("Branch to read commits from").strip()
            if not choice:
                continue
            if choice in branches:
                logger.info("Using branch %s", choice)
                return BranchRef.from_remote_ref(choice)
            if self.repository.has_ref(choice):
                logger.info("Using branch %s", choice)
                return BranchRef(ref=choice, name=choice)
            logger.warning("Unknown branch: %s", choice)
