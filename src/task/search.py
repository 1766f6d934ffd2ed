"""
検索モジュール。

割り当て・タスクのリストを受け取って絞り込む関数群。状態は持たない。
結果は入力の順序を保ち、重複は除去しない。
"""

from collections.abc import Iterable
from datetime import datetime

from src.task.models import Task, TaskAssignment, TaskStatus, TeamMember


def find_tasks_by_executor(assignments: Iterable[TaskAssignment], executor_id: str) -> list[Task]:
    """担当者IDに一致する割り当てのタスクを返す。

    Args:
        assignments: 検索対象の割り当て
        executor_id: 担当メンバーのID

    Returns:
        割り当て順のタスク(同じタスクが複数回現れることがある)
    """
    return [a.task for a in assignments if a.executor.id == executor_id]


def find_executors_by_task(
    assignments: Iterable[TaskAssignment], task_id: str
) -> list[TeamMember]:
    """タスクIDに一致する割り当ての担当者を返す。

    Args:
        assignments: 検索対象の割り当て
        task_id: タスクID

    Returns:
        割り当て順の担当メンバー(重複あり)
    """
    return [a.executor for a in assignments if a.task.id == task_id]


def find_tasks_by_status_and_deadline(
    tasks: Iterable[Task],
    status: TaskStatus,
    deadline_passed: bool,
    now: datetime | None = None,
) -> list[Task]:
    """状態と期限の条件に一致するタスクを返す。

    Args:
        tasks: 検索対象のタスク
        status: 一致させる状態
        deadline_passed: Trueなら期限が now より前、Falseなら now 以降のタスク
        now: 判定に使う現在時刻(省略時は呼び出し時点の時刻)

    Returns:
        元の順序を保ったタスクのリスト
    """
    if now is None:
        now = datetime.now()
    return [t for t in tasks if t.status == status and t.is_overdue(now) == deadline_passed]
