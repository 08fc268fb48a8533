"""Service layer for task list operations."""

from structlog import get_logger

from .store import TaskStore

logger = get_logger(__name__)

TASK_ADDED = "Task added"
TASK_DELETED = "Task deleted"


async def list_tasks(store: TaskStore) -> list[str]:
    """Read the whole task list in stored order."""
    tasks = await store.list_tasks()
    logger.debug("tasks_listed", count=len(tasks))
    return tasks


async def add_task(store: TaskStore, task: str) -> str:
    """Append a task and return the confirmation text (not the list)."""
    length = await store.add_task(task)
    logger.info("task_added", list_length=length)
    return TASK_ADDED


async def delete_task(store: TaskStore, task: str) -> str:
    """Remove all occurrences of a task.
    
    The confirmation is the same whether or not anything matched.
    """
    removed = await store.remove_task(task)
    logger.info("task_deleted", removed=removed)
    return TASK_DELETED
