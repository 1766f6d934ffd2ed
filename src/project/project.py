"""
プロジェクトモジュール。

プロジェクトが保持するタスクとチームメンバーのCRUD、
完了状態・期限のレポートを提供する。

- 一覧は挿入順のリストで保持し、IDの検索は線形走査
- 更新で対象が見つからない場合はNotFoundError、削除は何もしない
- 現在時刻(clock)とレポート出力先(writer)は差し替え可能
"""

import logging
from datetime import datetime

from src.config import get_settings
from src.task.models import NotFoundError, Task, TaskStatus, TeamMember
from src.task.report import (
    Clock,
    ReportWriter,
    format_deadline_line,
    format_status_line,
    write_stdout,
)

logger = logging.getLogger(__name__)


class Project:
    """タスクとチームメンバーを保持するプロジェクト。

    Attributes:
        name: プロジェクト名
        _tasks: 挿入順のタスクリスト
        _team_members: 挿入順のメンバーリスト
        _clock: 現在時刻の取得関数
        _writer: レポート行の出力先
    """

    def __init__(
        self,
        name: str | None = None,
        clock: Clock = datetime.now,
        writer: ReportWriter = write_stdout,
    ) -> None:
        """Projectを初期化する。

        Args:
            name: プロジェクト名(省略時は設定のproject_name)
            clock: 期限判定に使う現在時刻の取得関数
            writer: レポート行の出力先
        """
        self.name = name if name is not None else get_settings().project_name
        self._tasks: list[Task] = []
        self._team_members: list[TeamMember] = []
        self._clock = clock
        self._writer = writer

        logger.info("Project initialized: name=%s", self.name)

    # ---- tasks ----

    def add_task(self, task: Task) -> None:
        """タスクを追加する。"""
        self._tasks.append(task)
        logger.info("Task added: id=%s, title=%s", task.id, task.title)

    def remove_task(self, task_id: str) -> None:
        """IDが一致するタスクを全て削除する。存在しなくてもエラーにしない。

        割り当て側の参照は削除されない。
        """
        before = len(self._tasks)
        self._tasks[:] = [t for t in self._tasks if t.id != task_id]
        removed = before - len(self._tasks)
        if removed:
            logger.info("Task removed: id=%s, count=%d", task_id, removed)
        else:
            logger.debug("Task to remove not found: %s", task_id)

    def update_task(
        self,
        task_id: str,
        new_title: str | None = None,
        new_description: str | None = None,
        new_deadline: datetime | None = None,
    ) -> None:
        """タスクの属性を更新する。Noneの引数は変更しない。

        Args:
            task_id: タスクID
            new_title: 新しいタイトル
            new_description: 新しい説明
            new_deadline: 新しい期限

        Raises:
            NotFoundError: タスクが存在しない場合
        """
        task = self._find_task(task_id)

        if new_title is not None:
            task.title = new_title
        if new_description is not None:
            task.description = new_description
        if new_deadline is not None:
            task.deadline = new_deadline

        logger.info("Task updated: id=%s", task_id)

    def get_all_tasks(self) -> list[Task]:
        """全タスクを返す(内部リストそのもの)。"""
        return self._tasks

    # ---- team members ----

    def add_team_member(self, member: TeamMember) -> None:
        """メンバーを追加する。"""
        self._team_members.append(member)
        logger.info("Team member added: id=%s, name=%s", member.id, member.name)

    def remove_team_member(self, member_id: str) -> None:
        """IDが一致するメンバーを全て削除する。存在しなくてもエラーにしない。"""
        before = len(self._team_members)
        self._team_members[:] = [m for m in self._team_members if m.id != member_id]
        removed = before - len(self._team_members)
        if removed:
            logger.info("Team member removed: id=%s, count=%d", member_id, removed)
        else:
            logger.debug("Team member to remove not found: %s", member_id)

    def update_team_member(
        self,
        member_id: str,
        new_name: str | None = None,
        new_role: str | None = None,
    ) -> None:
        """メンバーの属性を更新する。Noneの引数は変更しない。

        Args:
            member_id: メンバーID
            new_name: 新しい氏名
            new_role: 新しい役割

        Raises:
            NotFoundError: メンバーが存在しない場合
        """
        member = self._find_team_member(member_id)

        if new_name is not None:
            member.name = new_name
        if new_role is not None:
            member.role = new_role

        logger.info("Team member updated: id=%s", member_id)

    def get_all_team_members(self) -> list[TeamMember]:
        """全メンバーを返す(内部リストそのもの)。"""
        return self._team_members

    # ---- queries / reports ----

    def get_completed_tasks(self) -> list[Task]:
        """完了状態のタスクを元の順序で返す。"""
        return [t for t in self._tasks if t.status == TaskStatus.COMPLETED]

    def get_incomplete_tasks(self) -> list[Task]:
        """完了以外の状態のタスクを元の順序で返す。"""
        return [t for t in self._tasks if t.status != TaskStatus.COMPLETED]

    def check_deadlines(self) -> list[str]:
        """各タスクが期限切れか期限内かをレポートする。状態は変更しない。

        Returns:
            出力したレポート行(タスク順)
        """
        now = self._clock()
        lines = [format_deadline_line(task, now) for task in self._tasks]
        for line in lines:
            self._writer(line)
        return lines

    def display_project_status(self) -> list[str]:
        """各タスクのタイトル・状態・進捗率をレポートする。

        Returns:
            出力したレポート行(タスク順)
        """
        lines = [format_status_line(task) for task in self._tasks]
        for line in lines:
            self._writer(line)
        return lines

    def _find_task(self, task_id: str) -> Task:
        """IDが一致する最初のタスクを返す。

        Raises:
            NotFoundError: タスクが存在しない場合
        """
        for task in self._tasks:
            if task.id == task_id:
                return task

        logger.warning("Task not found: %s", task_id)
        raise NotFoundError("task", task_id)

    def _find_team_member(self, member_id: str) -> TeamMember:
        """IDが一致する最初のメンバーを返す。

        Raises:
            NotFoundError: メンバーが存在しない場合
        """
        for member in self._team_members:
            if member.id == member_id:
                return member

        logger.warning("Team member not found: %s", member_id)
        raise NotFoundError("team member", member_id)
