"""Pipeline components for jirac."""

from .assembler import CommentAssembler, oldest_first
from .branch import BranchResolver
from .output import OutputSink
from .platform import ClipboardTool, require_tools, select_clipboard
from .project import MetadataReader, ProjectLocator, normalize_scm_url
from .repository import GitRepository
from .selector import CommitSelector, EditorSelectionPrompt, SelectionPrompt

__all__ = [
    "BranchResolver",
    "ClipboardTool",
    "CommentAssembler",
    "CommitSelector",
    "EditorSelectionPrompt",
    "GitRepository",
    "MetadataReader",
    "OutputSink",
    "ProjectLocator",
    "SelectionPrompt",
    "normalize_scm_url",
    "oldest_first",
    "require_tools",
    "select_clipboard",
]
