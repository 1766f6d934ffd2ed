"""
アプリケーションのエントリーポイント。

デモ用のプロジェクトを作成し、各操作を一度ずつ実行して結果を出力する。
環境変数の読み込み、ロギング設定、Project/TaskManagerの作成、レポート出力を行う。
"""

import logging
from datetime import datetime, timedelta

from src.config import Settings, get_settings
from src.project import Project
from src.task import (
    Task,
    TaskManagerImpl,
    TaskStatus,
    TeamMember,
    find_executors_by_task,
    find_tasks_by_executor,
    find_tasks_by_status_and_deadline,
)
from src.task.report import Clock, ReportWriter, write_stdout

logger = logging.getLogger(__name__)


def run_demo(
    settings: Settings,
    writer: ReportWriter = write_stdout,
    clock: Clock = datetime.now,
) -> None:
    """デモシナリオを実行する。

    以下の処理を順次実行する:
    1. チームメンバーの追加・更新・削除
    2. タスクの追加・更新・削除
    3. タスクの割り当てと状態・進捗率の更新
    4. 一覧・期限・作業負荷・プロジェクト状況のレポート
    5. 検索

    Args:
        settings: アプリケーション設定
        writer: レポート行の出力先
        clock: 現在時刻の取得関数
    """
    project = Project(name=settings.project_name, clock=clock, writer=writer)
    manager = TaskManagerImpl(
        writer=writer,
        sync_status_with_progress=settings.sync_status_with_progress,
    )
    now = clock()

    # チームメンバー
    mykyta = TeamMember(name="Mykyta", role="Backend Developer")
    olena = TeamMember(name="Olena", role="Team Lead")
    serhii = TeamMember(name="Serhii", role="Full Stack Developer")
    anhelina = TeamMember(name="Anhelina", role="Designer")
    bohdan = TeamMember(name="Bohdan", role="Backend Developer")
    roman = TeamMember(name="Roman", role="Backend Developer")
    for member in (mykyta, olena, serhii, anhelina, bohdan, roman):
        project.add_team_member(member)

    project.update_team_member(mykyta.id, new_role="Full Stack Developer")
    project.remove_team_member(olena.id)

    writer(f"--- {project.name}: team ---")
    for member in project.get_all_team_members():
        writer(f"{member.name} as {member.role}")
    writer("")

    # タスク
    login = Task(
        title="Implement login",
        description="Login with email",
        deadline=now + timedelta(days=3),
    )
    mockup = Task(
        title="Create UI mockup",
        description="Design login screen",
        deadline=now + timedelta(days=1),
    )
    bugfix = Task(
        title="Fix bug #45",
        description="Resolve critical issue",
        deadline=now + timedelta(days=5),
    )
    wireframe = Task(
        title="Create homepage wireframe",
        description="Design a low-fidelity wireframe for the homepage layout",
        deadline=now + timedelta(days=5),
    )
    overdue = Task(
        title="Fix bug #23",
        description="Resolve critical issue",
        deadline=now - timedelta(days=4),
    )
    for task in (login, mockup, bugfix, wireframe, overdue):
        project.add_task(task)

    project.update_task(mockup.id, new_deadline=now + timedelta(days=1))
    project.remove_task(wireframe.id)

    # 割り当て(削除済みのwireframeも割り当てられる)
    manager.assign_task(login, mykyta)
    manager.assign_task(bugfix, mykyta)
    manager.assign_task(mockup, anhelina)
    manager.assign_task(bugfix, serhii)
    manager.assign_task(wireframe, anhelina)
    manager.assign_task(login, roman)

    manager.update_task_status(bugfix.id, TaskStatus.COMPLETED)
    manager.update_task_completion(login.id, 60)

    writer("--- Tasks ---")
    for task in project.get_all_tasks():
        writer(f"{task.title}: {task.description}")

    writer("")
    writer("Completed tasks:")
    for task in project.get_completed_tasks():
        writer(f"{task.title}: {task.description} ({task.status.value})")

    writer("")
    writer("Incomplete tasks:")
    for task in project.get_incomplete_tasks():
        writer(f"{task.title}: {task.description} ({task.status.value})")
    writer("")

    writer("--- Deadlines ---")
    project.check_deadlines()
    writer("")

    writer("--- Workload ---")
    manager.check_workload_for_all_members()
    writer("")

    writer("--- Project status ---")
    project.display_project_status()
    writer("")

    writer("--- Search ---")
    assignments = manager.get_all_assignments()

    writer(f"Tasks taken by '{mykyta.name}':")
    for task in find_tasks_by_executor(assignments, mykyta.id):
        writer(f"- {task.title}")
    writer("")

    writer(f"Executors of the task '{login.title}':")
    for member in find_executors_by_task(assignments, login.id):
        writer(f"- {member.name} ({member.role})")
    writer("")

    writer("Not started tasks with expired deadlines:")
    for task in find_tasks_by_status_and_deadline(
        project.get_all_tasks(), TaskStatus.NOT_STARTED, deadline_passed=True, now=clock()
    ):
        writer(f"- {task.title}")
    writer("")

    writer("Completed tasks that have not yet expired:")
    for task in find_tasks_by_status_and_deadline(
        project.get_all_tasks(), TaskStatus.COMPLETED, deadline_passed=False, now=clock()
    ):
        writer(f"- {task.title}")


def main() -> None:
    """アプリケーションのエントリーポイント。

    環境変数から設定を読み込み、ロギングを設定してデモシナリオを実行する。
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info("Starting demo: project=%s", settings.project_name)
    run_demo(settings)


if __name__ == "__main__":
    main()
