"""Building the issue tracker comment from the selected commits."""

from typing import Iterable, List

from jirac.logging import get_logger
from jirac.models import BranchRef, Commit, CommentDocument, CommentEntry, ProjectMetadata

logger = get_logger("assembler")


def oldest_first(commits: Iterable[Commit]) -> List[Commit]:
    """Order commits oldest first, dropping repeated hashes."""
    unique = {}
    for commit in commits:
        unique.setdefault(commit.hexsha, commit)
    # commits without a log position fall back to their commit date
    return sorted(
        unique.values(), key=lambda commit: (-commit.log_position, commit.committed_date)
    )


class CommentAssembler:
    """Turns project metadata and commits into a ``CommentDocument``."""

    def assemble(
        self, metadata: ProjectMetadata, branch: BranchRef, commits: Iterable[Commit]
    ) -> CommentDocument:
        entries = tuple(
            CommentEntry(
                subject=commit.subject,
                link=metadata.commit_url(commit.hexsha),
                body=commit.body,
            )
            for commit in oldest_first(commits)
        )
        logger.debug("Assembled %d entries for %s", len(entries), branch.name)
        return CommentDocument(
            project=metadata.name,
            branch=branch.name,
            version=metadata.version,
            entries=entries,
        )

    def render(
        self, metadata: ProjectMetadata, branch: BranchRef, commits: Iterable[Commit]
    ) -> str:
        """Assemble and render the comment in one step."""
        return self.assemble(metadata, branch, commits).render()
