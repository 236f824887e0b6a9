from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ActionOutcome(str, Enum):
    """
    Enumeration of what can happen to an existing target directory.
    """

    REMOVED = "REMOVED"
    WOULD_REMOVE = "WOULD_REMOVE"
    FAILED = "FAILED"


@dataclass
class CleanAction:
    """
    Represents the removal (or simulated removal) of a single target directory.

    Attributes:
        path (Path): Absolute path of the target directory.
        label (str): Label of the rule set that selected it.
        outcome (ActionOutcome): What happened to the directory.
        error (str, optional): The underlying error message for failures.
    """

    path: Path
    label: str
    outcome: ActionOutcome
    error: Optional[str] = None


@dataclass
class RunSummary:
    """
    Aggregate counters for one rule set pass.

    Attributes:
        label (str): Label of the rule set.
        dry_run (bool): Whether the pass only simulated removals.
        cleaned (int): Directories removed, or that would be removed in a dry run.
        failed (int): Directories whose removal raised an error.
        actions (List[CleanAction]): Every action recorded during the pass.
    """

    label: str
    dry_run: bool = False
    cleaned: int = 0
    failed: int = 0
    actions: List[CleanAction] = field(default_factory=list)

    def record(self, action: CleanAction) -> None:
        self.actions.append(action)
        if action.outcome == ActionOutcome.FAILED:
            self.failed += 1
        else:
            self.cleaned += 1

    @property
    def total(self) -> int:
        """
        Number of target directories acted upon, successfully or not.
        """
        return self.cleaned + self.failed
