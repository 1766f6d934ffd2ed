"""
Pytest設定と共有フィクスチャ。

プロジェクト全体で共有されるフィクスチャと設定を定義します。
期限判定は固定時刻(FIXED_NOW)で行い、レポート出力はリストに収集します。
"""

from datetime import datetime, timedelta

import pytest
from src.project import Project
from src.task.manager import TaskManagerImpl
from src.task.models import Task, TeamMember

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    """テスト用の固定された現在時刻を提供。"""
    return FIXED_NOW


@pytest.fixture
def report_lines() -> list[str]:
    """レポート出力先として使うリストを提供。"""
    return []


@pytest.fixture
def project(report_lines: list[str]) -> Project:
    """固定時刻とリスト出力を使うProjectを提供。"""
    return Project(name="Test project", clock=lambda: FIXED_NOW, writer=report_lines.append)


@pytest.fixture
def manager(report_lines: list[str]) -> TaskManagerImpl:
    """リスト出力を使うTaskManagerImplを提供。"""
    return TaskManagerImpl(writer=report_lines.append)


@pytest.fixture
def member() -> TeamMember:
    """テスト用のメンバーを提供。"""
    return TeamMember(name="Mykyta", role="Backend Developer")


@pytest.fixture
def other_member() -> TeamMember:
    """2人目のテスト用メンバーを提供。"""
    return TeamMember(name="Anhelina", role="Designer")


@pytest.fixture
def future_task() -> Task:
    """期限が3日後のタスクを提供。"""
    return Task(
        title="Implement login",
        description="Login with email",
        deadline=FIXED_NOW + timedelta(days=3),
    )


@pytest.fixture
def overdue_task() -> Task:
    """期限が4日前のタスクを提供。"""
    return Task(
        title="Fix bug #23",
        description="Resolve critical issue",
        deadline=FIXED_NOW - timedelta(days=4),
    )
