import os
import shutil
import logging
from pathlib import Path
from typing import List, Sequence

from core.rules import RuleSet
from core.scanner import find_project_roots
from core.schema import ActionOutcome, CleanAction, RunSummary
from core.report import print_action, log_summary

logger = logging.getLogger(__name__)


def clean_project(project_root: Path, rule_set: RuleSet, dry_run: bool, summary: RunSummary) -> None:
    """
    Remove (or report) every existing target directory of a matched project root.

    A failed removal is logged and counted, then the remaining targets are still
    processed.

    Args:
        project_root (Path): A directory classified as a project root.
        rule_set (RuleSet): The rule set that matched it.
        dry_run (bool): Only report what would be removed.
        summary (RunSummary): Collects the outcomes.

    Returns:
        None
    """
    for target in rule_set.targets:
        target_path = project_root / target
        if not os.path.exists(target_path):
            continue

        if dry_run:
            action = CleanAction(target_path, rule_set.label, ActionOutcome.WOULD_REMOVE)
        else:
            try:
                if target_path.is_symlink():
                    # only the link goes, never what it points to
                    target_path.unlink()
                else:
                    shutil.rmtree(target_path)
                action = CleanAction(target_path, rule_set.label, ActionOutcome.REMOVED)
            except OSError as e:
                logger.error(f"Failed to remove {target_path}: {e}")
                action = CleanAction(target_path, rule_set.label, ActionOutcome.FAILED, error=str(e))

        summary.record(action)
        print_action(action)


def clean_rule_set(root_dir: Path, rule_set: RuleSet, dry_run: bool = False) -> RunSummary:
    """
    Scan ``root_dir`` for one ecosystem's projects and clean each of them.

    Args:
        root_dir (Path): The directory tree to scan.
        rule_set (RuleSet): The ecosystem rules.
        dry_run (bool): Only report what would be removed.

    Returns:
        RunSummary: Counters and actions of the pass.
    """
    logger.info(f"Cleaning {rule_set.label} projects in: {root_dir}")
    summary = RunSummary(label=rule_set.label, dry_run=dry_run)

    for project_root in find_project_roots(root_dir, rule_set):
        clean_project(project_root, rule_set, dry_run, summary)

    log_summary(summary)
    return summary


def clean_all(root_dir: Path, rule_sets: Sequence[RuleSet], dry_run: bool = False) -> List[RunSummary]:
    """Run one full pass per rule set, strictly in the given order."""
    return [clean_rule_set(root_dir, rule_set, dry_run) for rule_set in rule_sets]
