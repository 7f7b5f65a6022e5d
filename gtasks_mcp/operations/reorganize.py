"""Prefix-based bulk reorganization of tasks into lists."""

import logging

from gtasks_mcp.errors import GTasksError
from gtasks_mcp.models.results import MovePlan, ReorganizeReport
from gtasks_mcp.models.task import TaskListModel, TaskModel
from gtasks_mcp.operations.listing import collect_tasks, fetch_task_lists
from gtasks_mcp.operations.transfer import transfer_task
from gtasks_mcp.utils.api import TasksClient

logger = logging.getLogger(__name__)


def _normalize_title(title: str) -> str:
    return title.lower().strip()


def _resolve_list_id(
    title: str,
    by_title: dict[str, str],
    by_normalized_title: dict[str, str],
) -> str | None:
    # Exact title first; the normalized lookup is only a fallback
    return by_title.get(title) or by_normalized_title.get(_normalize_title(title))


def plan_reorganization(
    tasks: list[TaskModel],
    task_lists: list[TaskListModel],
    prefix_mappings: dict[str, str],
) -> tuple[list[MovePlan], list[str]]:
    """
    Work out which tasks a set of prefix mappings would move.

    A task is routed by the first mapping (in mapping order) whose ``[PREFIX]``
    starts its title. If that mapping's list cannot be found the task is
    skipped with a warning; tasks already in their target list are skipped
    silently.

    Args:
        tasks: Tasks annotated with their current list
        task_lists: All task lists, used to resolve target titles
        prefix_mappings: Prefix -> target task list title

    Returns:
        Tuple of (move plans, warnings)
    """
    by_title: dict[str, str] = {}
    by_normalized_title: dict[str, str] = {}
    for task_list in task_lists:
        if task_list.title and task_list.id:
            by_title[task_list.title] = task_list.id
            by_normalized_title[_normalize_title(task_list.title)] = task_list.id

    plans: list[MovePlan] = []
    warnings: list[str] = []

    for task in tasks:
        if not task.title or not task.task_list_id or not task.id:
            continue

        for prefix, target_title in prefix_mappings.items():
            if not task.title.startswith(f"[{prefix}]"):
                continue

            target_id = _resolve_list_id(target_title, by_title, by_normalized_title)
            if not target_id:
                warning = (
                    f'Target list "{target_title}" for prefix [{prefix}] not found. '
                    f"Available lists: {', '.join(by_title)}"
                )
                logger.warning(warning)
                if warning not in warnings:
                    warnings.append(warning)
            elif task.task_list_id != target_id:
                plans.append(
                    MovePlan(
                        task=task,
                        target_task_list_id=target_id,
                        target_task_list_title=target_title,
                        prefix=prefix,
                    )
                )
            break

    return plans, warnings


async def reorganize_tasks(
    client: TasksClient,
    prefix_mappings: dict[str, str],
    dry_run: bool = False,
) -> ReorganizeReport:
    """
    Move every task whose title starts with a mapped ``[PREFIX]`` into the
    mapped list.

    In dry-run mode nothing is changed. Otherwise each planned move is run in
    order; one task failing to move does not stop the others.

    Raises:
        ValueError: If prefix_mappings is empty
        RemoteCallError: If the task lists cannot be fetched
    """
    if not prefix_mappings:
        raise ValueError("Prefix mappings are required and must not be empty")

    tasks = await collect_tasks(client)
    task_lists = await fetch_task_lists(client)
    plans, warnings = plan_reorganization(tasks, task_lists, prefix_mappings)

    report = ReorganizeReport(dry_run=dry_run, plans=plans, warnings=warnings)
    if dry_run:
        return report

    for plan in plans:
        task = plan.task
        try:
            outcome = await transfer_task(
                client,
                task.task_list_id,
                plan.target_task_list_id,
                task.id,
                task=task,
            )
        except GTasksError as e:
            logger.warning("Failed to move task %s: %s", task.id, e)
            report.failed.append({"title": task.title, "task_id": task.id, "error": str(e)})
            continue

        if outcome.source_removed:
            report.moved.append(outcome)
        else:
            report.partial.append(outcome)

    logger.info(
        "Reorganized tasks: %d moved, %d partial, %d failed",
        len(report.moved),
        len(report.partial),
        len(report.failed),
    )
    return report
