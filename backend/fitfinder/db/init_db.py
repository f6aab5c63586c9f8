"""
数据库初始化脚本
负责创建数据库表结构
"""

import os
from pathlib import Path

from sqlmodel import SQLModel, create_engine

# 导入模型以注册到 SQLModel.metadata
from fitfinder.models import User, Organization, OrganizationUser, Job, Resume  # noqa: F401


def get_database_url() -> str:
    """
    获取数据库连接 URL
    优先使用环境变量，否则使用默认的 SQLite 文件
    """
    db_path = os.environ.get("DATABASE_PATH", "database.db")
    # 确保路径是绝对路径
    if not os.path.isabs(db_path):
        # 从 backend 根目录解析
        project_root = Path(__file__).parent.parent.parent
        db_path = str(project_root / db_path)
    return f"sqlite:///{db_path}"


def get_engine():
    """
    创建并返回数据库引擎
    """
    database_url = get_database_url()
    # SQLite 配置
    engine = create_engine(
        database_url,
        echo=False,  # 设置为 True 可查看 SQL 语句
        connect_args={"check_same_thread": False}  # SQLite 特有配置
    )
    return engine


def create_tables(engine) -> None:
    """
    创建所有数据库表
    SQLModel 会自动根据模型创建表结构
    """
    SQLModel.metadata.create_all(engine)
    print(f"[InitDB] 数据表已就绪: {engine.url}")


def init_db(engine=None):
    """
    完整的数据库初始化流程
    1. 创建数据库引擎（未传入时）
    2. 创建所有表结构

    Returns:
        使用的数据库引擎
    """
    print("\n=== Initializing database ===")

    if engine is None:
        engine = get_engine()

    create_tables(engine)

    print("=== Database initialization completed ===\n")
    return engine


if __name__ == "__main__":
    # 直接运行此脚本时，执行数据库初始化
    init_db()
