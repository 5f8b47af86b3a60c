"""Main CLI interface for jirac."""

from typing import Optional

import click

from jirac import __version__
from jirac.core import (
    BranchResolver,
    CommentAssembler,
    CommitSelector,
    EditorSelectionPrompt,
    GitRepository,
    MetadataReader,
    OutputSink,
    ProjectLocator,
    require_tools,
    select_clipboard,
)
from jirac.core.selector import compile_pattern
from jirac.logging import LEVELS, configure_logging, effective_level, get_logger
from jirac.models import OutputMode, RunConfig, SelectionCriteria

logger = get_logger("cli")


def _validate_pattern(ctx, param, value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not value:
        raise click.BadParameter("the pattern must not be empty")
    try:
        compile_pattern(value)
    except click.UsageError as e:
        raise click.BadParameter(e.message) from e
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--number",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Use the last N commits of the current user.",
)
@click.option(
    "--grep",
    "-g",
    default=None,
    callback=_validate_pattern,
    help="Use the commits whose message matches PATTERN (within the last N with --number).",
)
@click.option(
    "--standard-output",
    "standard_output",
    is_flag=True,
    help="Print the comment instead of copying it; only errors are logged.",
)
@click.option("--silent", "-s", is_flag=True, help="Do not log anything.")
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(LEVELS, case_sensitive=False),
    default="INFO",
    envvar="JIRAC_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity.",
)
@click.version_option(version=__version__)
def main(
    number: Optional[int],
    grep: Optional[str],
    standard_output: bool,
    silent: bool,
    log_level: str,
):
    """Summarise your commits as a comment for the issue tracker.

    Run inside a Maven project. Without --number or --grep the latest
    commits open in your editor for marking.
    """
    output_mode = OutputMode.STDOUT if standard_output else OutputMode.CLIPBOARD
    config = RunConfig(
        criteria=SelectionCriteria(count=number, pattern=grep),
        output_mode=output_mode,
        log_level=effective_level(log_level, silent=silent, stdout_mode=standard_output),
    )
    configure_logging(config.log_level)
    logger.debug("Run configuration: %s", config)
    run(config)


def run(config: RunConfig) -> str:
    """Run the whole pipeline and return the generated comment."""
    clipboard = None
    required = ["git"]
    if config.output_mode is OutputMode.CLIPBOARD:
        clipboard = select_clipboard()
        required.append(clipboard.executable)
    require_tools(required)

    pom = ProjectLocator(config.working_directory).locate()
    metadata = MetadataReader(pom).read()

    repository = GitRepository(pom.parent)
    branch = BranchResolver(repository, interactive=config.interactive_prompts_allowed).resolve()
    author = repository.user_identity()

    prompt = EditorSelectionPrompt(editor=repository.editor())
    selector = CommitSelector(repository, prompt=prompt, candidate_limit=config.candidate_limit)
    commits = selector.select(author, branch, config.criteria)

    text = CommentAssembler().render(metadata, branch, commits)
    OutputSink(config.output_mode, clipboard=clipboard).emit(text)
    return text


if __name__ == "__main__":
    main()
