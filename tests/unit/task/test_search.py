"""検索関数の単体テスト。

テスト対象:
- find_tasks_by_executor
- find_executors_by_task
- find_tasks_by_status_and_deadline
"""

from datetime import datetime, timedelta, timezone

import pytest
from src.project import Project
from src.task.manager import TaskManagerImpl
from src.task.models import Task, TaskStatus, TeamMember
from src.task.search import (
    find_executors_by_task,
    find_tasks_by_executor,
    find_tasks_by_status_and_deadline,
)


class TestFindByExecutorAndTask:
    """担当者・タスクによる検索のテスト。"""

    @pytest.fixture
    def populated(
        self,
        manager: TaskManagerImpl,
        future_task: Task,
        overdue_task: Task,
        member: TeamMember,
        other_member: TeamMember,
    ) -> TaskManagerImpl:
        manager.assign_task(future_task, member)
        manager.assign_task(overdue_task, other_member)
        manager.assign_task(overdue_task, member)
        manager.assign_task(future_task, member)
        return manager

    def test_tasks_by_executor_in_assignment_order(
        self,
        populated: TaskManagerImpl,
        future_task: Task,
        overdue_task: Task,
        member: TeamMember,
    ) -> None:
        """割り当て順でタスクが返され、重複は除去されない。"""
        tasks = find_tasks_by_executor(populated.get_all_assignments(), member.id)

        assert tasks == [future_task, overdue_task, future_task]
        assert tasks[0] is future_task

    def test_tasks_by_unknown_executor(self, populated: TaskManagerImpl) -> None:
        """一致しない担当者IDでは空リストを返す。"""
        assert find_tasks_by_executor(populated.get_all_assignments(), "missing-id") == []

    def test_executors_by_task_in_assignment_order(
        self,
        populated: TaskManagerImpl,
        overdue_task: Task,
        future_task: Task,
        member: TeamMember,
        other_member: TeamMember,
    ) -> None:
        """割り当て順で担当者が返され、重複は除去されない。"""
        assignments = populated.get_all_assignments()

        assert find_executors_by_task(assignments, overdue_task.id) == [other_member, member]
        assert find_executors_by_task(assignments, future_task.id) == [member, member]

    def test_stale_references_are_returned(
        self, manager: TaskManagerImpl, future_task: Task, member: TeamMember
    ) -> None:
        """プロジェクトから削除された後も割り当て経由で検索できる。"""
        project = Project(writer=lambda line: None)
        project.add_task(future_task)
        project.add_team_member(member)
        manager.assign_task(future_task, member)

        project.remove_task(future_task.id)
        project.remove_team_member(member.id)

        assert find_tasks_by_executor(manager.get_all_assignments(), member.id) == [future_task]
        assert find_executors_by_task(manager.get_all_assignments(), future_task.id) == [member]


class TestFindByStatusAndDeadline:
    """find_tasks_by_status_and_deadlineのテスト。"""

    @pytest.fixture
    def tasks(self, now: datetime) -> list[Task]:
        done_future = Task(title="done-future", description="", deadline=now + timedelta(days=1))
        done_future.update_progress(100)
        done_past = Task(title="done-past", description="", deadline=now - timedelta(days=1))
        done_past.update_progress(100)
        done_now = Task(title="done-now", description="", deadline=now)
        done_now.update_progress(100)
        idle_past = Task(title="idle-past", description="", deadline=now - timedelta(days=4))
        idle_future = Task(title="idle-future", description="", deadline=now + timedelta(days=4))
        return [done_future, done_past, done_now, idle_past, idle_future]

    def test_completed_within_deadline(self, tasks: list[Task], now: datetime) -> None:
        """期限がnow以降の完了タスクだけが返される(期限ちょうどを含む)。"""
        result = find_tasks_by_status_and_deadline(
            tasks, TaskStatus.COMPLETED, deadline_passed=False, now=now
        )

        assert [t.title for t in result] == ["done-future", "done-now"]

    def test_completed_deadline_passed(self, tasks: list[Task], now: datetime) -> None:
        """期限がnowより前の完了タスクだけが返される。"""
        result = find_tasks_by_status_and_deadline(
            tasks, TaskStatus.COMPLETED, deadline_passed=True, now=now
        )

        assert [t.title for t in result] == ["done-past"]

    def test_not_started_deadline_passed(self, tasks: list[Task], now: datetime) -> None:
        """未着手かつ期限切れのタスクが返される。"""
        result = find_tasks_by_status_and_deadline(
            tasks, TaskStatus.NOT_STARTED, deadline_passed=True, now=now
        )

        assert [t.title for t in result] == ["idle-past"]

    def test_no_match(self, tasks: list[Task], now: datetime) -> None:
        """一致する状態がない場合は空リストを返す。"""
        result = find_tasks_by_status_and_deadline(
            tasks, TaskStatus.IN_PROGRESS, deadline_passed=False, now=now
        )

        assert result == []

    def test_default_now_uses_current_time(self) -> None:
        """nowを省略すると呼び出し時点の時刻で判定する。"""
        past = Task(title="past", description="", deadline=datetime.now() - timedelta(days=1))
        future = Task(title="future", description="", deadline=datetime.now() + timedelta(days=1))

        result = find_tasks_by_status_and_deadline(
            [past, future], TaskStatus.NOT_STARTED, deadline_passed=True
        )

        assert result == [past]

    def test_aware_deadline_compared_with_naive_now(self, now: datetime) -> None:
        """タイムゾーン付きの期限もnaiveなnowと比較して判定する。"""
        aware_past = Task(
            title="aware-past",
            description="",
            deadline=(now - timedelta(hours=1)).astimezone(timezone.utc),
        )
        aware_future = Task(title="aware-future", description="", deadline="2026-03-04T12:00:00Z")

        passed = find_tasks_by_status_and_deadline(
            [aware_past, aware_future], TaskStatus.NOT_STARTED, deadline_passed=True, now=now
        )
        within = find_tasks_by_status_and_deadline(
            [aware_past, aware_future], TaskStatus.NOT_STARTED, deadline_passed=False, now=now
        )

        assert passed == [aware_past]
        assert within == [aware_future]
