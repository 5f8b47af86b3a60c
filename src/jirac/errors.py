"""Errors raised by jirac.

Every fatal condition is a ``click.ClickException`` so the command line
entry point reports it as ``Error: <message>`` and exits non-zero.
"""

from typing import Optional

import click

UsageError = click.UsageError


class JiracError(click.ClickException):
    """Base class for fatal jirac errors."""

    exit_code = 1


class DependencyMissingError(JiracError):
    """A required external tool is not installed."""

    exit_code = 3

    def __init__(self, tools):
        self.tools = list(tools)
        super().__init__(f"Missing required tool(s): {', '.join(self.tools)}")


class ProjectNotFoundError(JiracError):
    """Not inside a git working tree holding a Maven project."""

    exit_code = 4


class MetadataMissingError(JiracError):
    """A required field of the project descriptor is missing."""

    exit_code = 5

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class IdentityMissingError(JiracError):
    """git has no user.name or user.email configured."""

    exit_code = 6


class NoUpstreamError(JiracError):
    """No branch could be resolved to read commits from."""

    exit_code = 7


class NoPushedCommitError(JiracError):
    """The current user has no commit on the selected branch."""

    exit_code = 8


class NoMatchError(JiracError):
    """The count or pattern filter selected nothing."""

    exit_code = 9

    def __init__(self, count: Optional[int] = None, pattern: Optional[str] = None):
        self.count = count
        self.pattern = pattern
        filters = []
        if count is not None:
            filters.append(f"number={count}")
        if pattern is not None:
            filters.append(f"grep={pattern}")
        super().__init__(f"No commit matches the given filter ({', '.join(filters)})")
