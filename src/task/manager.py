"""
タスクマネージャーモジュール。

タスク割り当ての管理を担当する:
- Protocol型でTaskManagerインターフェース定義
- TaskManagerImplクラスで実装
- タスク割り当て(assign_task)機能
- 状態・進捗率の更新機能
- メンバーごとの作業負荷レポート

割り当てはTask/TeamMemberの同一インスタンスを参照するため、
更新は全ての割り当てとプロジェクトから見える。
"""

import logging
from typing import Protocol

from src.task.models import NotFoundError, Task, TaskAssignment, TaskStatus, TeamMember
from src.task.report import ReportWriter, format_workload_line, write_stdout

logger = logging.getLogger(__name__)


class TaskManager(Protocol):
    """タスクマネージャーのプロトコル定義。

    - assign_task: タスクをメンバーに割り当て
    - update_task_status: 割り当て済みタスクの状態を更新
    - update_task_completion: 割り当て済みタスクの進捗率を更新
    - check_workload_for_all_members: 作業負荷レポート
    - get_all_assignments: 全割り当ての取得
    """

    def assign_task(self, task: Task, member: TeamMember) -> TaskAssignment:
        """タスクをメンバーに割り当てる。

        Args:
            task: 割り当てるタスク
            member: 担当メンバー

        Returns:
            作成された割り当て
        """
        ...

    def update_task_status(self, task_id: str, status: TaskStatus) -> None:
        """割り当て済みタスクの状態を更新する。

        Args:
            task_id: タスクID
            status: 新しい状態

        Raises:
            NotFoundError: 割り当てが存在しない場合
        """
        ...

    def update_task_completion(self, task_id: str, percent: int) -> None:
        """割り当て済みタスクの進捗率を更新する。

        Args:
            task_id: タスクID
            percent: 新しい進捗率

        Raises:
            NotFoundError: 割り当てが存在しない場合
        """
        ...

    def check_workload_for_all_members(self) -> list[str]:
        """メンバーごとの割り当て件数をレポートする。

        Returns:
            出力したレポート行
        """
        ...

    def get_all_assignments(self) -> list[TaskAssignment]:
        """全割り当てを返す。"""
        ...


class TaskManagerImpl:
    """TaskManagerの実装クラス。

    機能:
    - 割り当ての追加(重複排除なし、削除なし)
    - 最初に一致した割り当て経由での状態・進捗率更新
    - 担当者ごとの件数集計

    Attributes:
        _assignments: 挿入順の割り当てリスト
        _writer: レポート行の出力先
        _sync_status_with_progress: Trueの場合、IN_PROGRESSへの更新でも進捗率を整合させる
    """

    def __init__(
        self,
        writer: ReportWriter = write_stdout,
        sync_status_with_progress: bool = False,
    ) -> None:
        """TaskManagerImplを初期化する。

        Args:
            writer: レポート行の出力先
            sync_status_with_progress: IN_PROGRESSへの状態更新時も進捗率を整合させるか
        """
        self._assignments: list[TaskAssignment] = []
        self._writer = writer
        self._sync_status_with_progress = sync_status_with_progress

        logger.info(
            "TaskManagerImpl initialized: sync_status_with_progress=%s",
            sync_status_with_progress,
        )

    def assign_task(self, task: Task, member: TeamMember) -> TaskAssignment:
        """タスクをメンバーに割り当てる。

        既に完了済み・割り当て済みであっても状態をIN_PROGRESSにする。
        同じ組み合わせを再度割り当てると重複した割り当てが追加される。

        Args:
            task: 割り当てるタスク
            member: 担当メンバー

        Returns:
            作成された割り当て
        """
        assignment = TaskAssignment(task=task, executor=member)
        self._assignments.append(assignment)
        task.status = TaskStatus.IN_PROGRESS

        logger.info(
            "Task assigned: task_id=%s, member_id=%s, assignments=%d",
            task.id,
            member.id,
            len(self._assignments),
        )

        return assignment

    def update_task_status(self, task_id: str, status: TaskStatus) -> None:
        """割り当て済みタスクの状態を更新する。

        状態は直接書き換える:
        - COMPLETED: 進捗率を100にする
        - NOT_STARTED: 進捗率を0にする
        - IN_PROGRESS: 進捗率はそのまま(sync_status_with_progressがFalseの場合)

        Args:
            task_id: タスクID
            status: 新しい状態

        Raises:
            NotFoundError: 割り当てが存在しない場合
        """
        task = self._find_assigned_task(task_id)

        task.status = status
        if status == TaskStatus.COMPLETED:
            task.update_progress(100)
        elif status == TaskStatus.NOT_STARTED:
            task.update_progress(0)
        elif self._sync_status_with_progress:
            # 0%と100%は IN_PROGRESS と矛盾するので最も近い値に寄せる
            if task.completion_percentage == 0:
                task.update_progress(1)
            elif task.completion_percentage == 100:
                task.update_progress(99)

        logger.info(
            "Task status updated: id=%s, status=%s, completion=%d",
            task_id,
            task.status.value,
            task.completion_percentage,
        )

    def update_task_completion(self, task_id: str, percent: int) -> None:
        """割り当て済みタスクの進捗率を更新する。

        Args:
            task_id: タスクID
            percent: 新しい進捗率(0〜100に丸められる)

        Raises:
            NotFoundError: 割り当てが存在しない場合
        """
        task = self._find_assigned_task(task_id)
        task.update_progress(percent)

        logger.info(
            "Task completion updated: id=%s, completion=%d, status=%s",
            task_id,
            task.completion_percentage,
            task.status.value,
        )

    def check_workload_for_all_members(self) -> list[str]:
        """メンバーごとの割り当て件数をレポートする。

        担当者IDでグループ化し、割り当て内で最初に現れた順に出力する。

        Returns:
            出力したレポート行
        """
        groups: dict[str, tuple[TeamMember, int]] = {}
        for assignment in self._assignments:
            member = assignment.executor
            first, count = groups.get(member.id, (member, 0))
            groups[member.id] = (first, count + 1)

        lines = [format_workload_line(member, count) for member, count in groups.values()]
        for line in lines:
            self._writer(line)

        logger.debug("Workload reported for %d members", len(lines))
        return lines

    def get_all_assignments(self) -> list[TaskAssignment]:
        """全割り当てを返す(コピーではなく内部リストそのもの)。"""
        return self._assignments

    def _find_assigned_task(self, task_id: str) -> Task:
        """task_idに一致する最初の割り当てのタスクを返す。

        Raises:
            NotFoundError: 割り当てが存在しない場合
        """
        for assignment in self._assignments:
            if assignment.task.id == task_id:
                return assignment.task

        logger.warning("Task not assigned: %s", task_id)
        raise NotFoundError("assignment", task_id)
