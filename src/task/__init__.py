"""
タスク管理モジュール。

タスク・メンバー・割り当てのモデル、割り当て管理、検索、レポートを担当する。
"""

from src.task.manager import (
    TaskManager,
    TaskManagerImpl,
)
from src.task.models import (
    NotFoundError,
    Task,
    TaskAssignment,
    TaskStatus,
    TeamMember,
)
from src.task.search import (
    find_executors_by_task,
    find_tasks_by_executor,
    find_tasks_by_status_and_deadline,
)

__all__ = [
    "NotFoundError",
    "Task",
    "TaskAssignment",
    "TaskManager",
    "TaskManagerImpl",
    "TaskStatus",
    "TeamMember",
    "find_executors_by_task",
    "find_tasks_by_executor",
    "find_tasks_by_status_and_deadline",
]
