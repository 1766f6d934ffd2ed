"""
レポート出力モジュール。

期限チェック・プロジェクト状況・作業負荷の各レポート行を生成する:
- ステータス表示: 未着手/作業中/完了
- 出力先(ReportWriter)と現在時刻(Clock)は差し替え可能
"""

import sys
from collections.abc import Callable
from datetime import datetime

from src.task.models import Task, TaskStatus, TeamMember

# 出力先と時刻取得の型エイリアス
ReportWriter = Callable[[str], None]
Clock = Callable[[], datetime]

# ステータス表示マッピング
STATUS_DISPLAY_MAP: dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: "Not started",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.COMPLETED: "Completed",
}

DEADLINE_PASSED = "deadline passed"
WITHIN_DEADLINE = "within deadline"


def write_stdout(line: str) -> None:
    """レポート行を標準出力に書き出す(デフォルトのReportWriter)。"""
    sys.stdout.write(line + "\n")


def format_deadline_line(task: Task, now: datetime) -> str:
    """期限チェックの1行をフォーマットする。

    Args:
        task: 対象タスク
        now: 判定に使う現在時刻

    Returns:
        期限切れなら "deadline passed"、それ以外は "within deadline" を含む行
    """
    verdict = DEADLINE_PASSED if task.is_overdue(now) else WITHIN_DEADLINE
    return f"Task '{task.title}' is {verdict}"


def format_status_line(task: Task) -> str:
    """プロジェクト状況の1行をフォーマットする。

    Args:
        task: 対象タスク

    Returns:
        タイトル・状態・進捗率を含む行
    """
    display_text = STATUS_DISPLAY_MAP.get(task.status, str(task.status.value))
    return f"- {task.title}: {display_text} ({task.completion_percentage}%)"


def format_workload_line(member: TeamMember, count: int) -> str:
    """作業負荷の1行をフォーマットする。

    Args:
        member: 担当メンバー
        count: そのメンバーへの割り当て件数

    Returns:
        氏名・役割・件数を含む行
    """
    return f"{member.name} ({member.role}) - Tasks: {count}"
