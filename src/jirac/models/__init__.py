"""Data models for jirac."""

from .commit import Commit, split_message
from .config import OutputMode, RunConfig, SelectionCriteria
from .document import CommentDocument, CommentEntry
from .project import BranchRef, ProjectMetadata

__all__ = [
    "BranchRef",
    "Commit",
    "CommentDocument",
    "CommentEntry",
    "OutputMode",
    "ProjectMetadata",
    "RunConfig",
    "SelectionCriteria",
    "split_message",
]
