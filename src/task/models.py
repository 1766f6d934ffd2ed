"""
タスク関連の型定義モジュール。

プロジェクト管理で扱う型をPydanticモデルとして実装する:
- TaskStatus: タスクの状態を表すEnum
- TeamMember: チームメンバー情報
- Task: タスク情報(進捗率と状態を保持)
- TaskAssignment: タスクと担当者の紐付け
- NotFoundError: 更新対象が存在しない場合の例外
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

ID_PATTERN = r"^[0-9a-f-]{36}$"


def to_local_naive(value: datetime) -> datetime:
    """タイムゾーン付きの日時をローカル時刻のnaiveな日時に変換する。

    naiveな日時はローカル時刻とみなしてそのまま返す。
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def generate_id() -> str:
    """UUID v4形式のIDを生成する。

    Returns:
        UUID v4形式の文字列(例: "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d")
    """
    return str(uuid.uuid4())


class NotFoundError(ValueError):
    """指定IDのタスク・メンバー・割り当てが見つからない場合の例外。

    Attributes:
        kind: 対象の種別("task", "team member", "assignment")
        entity_id: 見つからなかったID
    """

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} not found: {entity_id}")


class TaskStatus(Enum):
    """タスクの状態を表すEnum。

    - NOT_STARTED: 未着手(進捗0%)
    - IN_PROGRESS: 作業中
    - COMPLETED: 完了(進捗100%)
    """

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TeamMember(BaseModel):
    """チームメンバー情報。

    Attributes:
        id: UUID v4形式のメンバーID(生成時に自動採番)
        name: 氏名
        role: 役割(例: "Backend Developer")
    """

    id: str = Field(default_factory=generate_id, pattern=ID_PATTERN)
    name: str
    role: str


class Task(BaseModel):
    """タスク情報。

    生成直後は status=NOT_STARTED, completion_percentage=0。
    状態と進捗率の整合はupdate_progressでのみ保証される。

    Attributes:
        id: UUID v4形式のタスクID(生成時に自動採番)
        title: タイトル
        description: 説明
        deadline: 期限
        status: タスクの現在の状態
        completion_percentage: 進捗率(0〜100)
    """

    id: str = Field(default_factory=generate_id, pattern=ID_PATTERN)
    title: str
    description: str
    deadline: datetime
    status: TaskStatus = TaskStatus.NOT_STARTED
    completion_percentage: int = Field(default=0, ge=0, le=100)

    def update_progress(self, percent: int) -> None:
        """進捗率を更新し、状態を導出する。

        進捗率は0〜100に丸められ、丸めた値から状態を決める:
        100 -> COMPLETED, 1〜99 -> IN_PROGRESS, 0 -> NOT_STARTED

        Args:
            percent: 新しい進捗率(範囲外の値は丸められる)
        """
        clamped = max(0, min(100, percent))
        self.completion_percentage = clamped
        if clamped == 100:
            self.status = TaskStatus.COMPLETED
        elif clamped > 0:
            self.status = TaskStatus.IN_PROGRESS
        else:
            self.status = TaskStatus.NOT_STARTED

    def is_overdue(self, now: datetime) -> bool:
        """期限が now より前であればTrueを返す。

        タイムゾーン付きとnaiveな日時が混在しても比較できるよう、
        両方をローカル時刻のnaiveな日時に揃えてから比較する。
        """
        return to_local_naive(self.deadline) < to_local_naive(now)


class TaskAssignment(BaseModel):
    """タスクと担当者の紐付け。

    TaskとTeamMemberはコピーせず同一インスタンスを参照する。
    プロジェクトから削除された後も参照は残る。

    Attributes:
        task: 割り当てられたタスク
        executor: 担当メンバー
    """

    task: Task
    executor: TeamMember
