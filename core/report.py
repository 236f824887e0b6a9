import logging
from rich.console import Console
from rich.text import Text

from core.schema import ActionOutcome, CleanAction, RunSummary

logger = logging.getLogger(__name__)
console = Console(highlight=False)


def project_noun(count: int) -> str:
    return "project" if count == 1 else "projects"


def print_action(action: CleanAction) -> None:
    """
    Print the colored status line for a removed or would-be-removed directory.

    Failures are reported through logging by the cleaner and print nothing here.

    Args:
        action (CleanAction): The recorded action.

    Returns:
        None
    """
    line = Text()
    if action.outcome == ActionOutcome.WOULD_REMOVE:
        line.append("Would remove:", style="bold yellow")
        line.append(f" {action.path} ")
        line.append(f"({action.label} project)", style="dim")
    elif action.outcome == ActionOutcome.REMOVED:
        line.append("Removed:", style="bold green")
        line.append(f" {action.path}")
    else:
        return
    console.print(line, soft_wrap=True)


def log_summary(summary: RunSummary) -> None:
    """
    Log the closing line(s) of a rule set pass.

    Args:
        summary (RunSummary): The finished pass.

    Returns:
        None
    """
    if summary.total > 0:
        action = "Would remove" if summary.dry_run else "Removed"
        logger.info(f"{action} {summary.cleaned} {summary.label} {project_noun(summary.cleaned)}")
        if summary.failed > 0:
            logger.warning(f"Failed to remove {summary.failed} directories (permission denied or in use)")
    else:
        logger.info(f"No {summary.label} projects found to clean")
