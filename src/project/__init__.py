"""
プロジェクトモジュール。

タスクとチームメンバーを保持するProjectを提供する。
"""

from src.project.project import Project

__all__ = ["Project"]
