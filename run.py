"""
Run script untuk RobotikHub Portal
Usage: python run.py

Features:
- Auto-create .env from .env.example
- Auto-create MySQL database if not exists
- Auto-run migrations on startup
"""
import logging
import shutil
import subprocess
import sys
from pathlib import Path

import uvicorn

logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
logger = logging.getLogger("run")


def setup_env_file():
    """Copy .env.example to .env if .env doesn't exist"""
    env_file = Path(".env")
    env_example = Path(".env.example")

    if not env_file.exists() and env_example.exists():
        shutil.copy(env_example, env_file)
        logger.info("Created .env from .env.example")
        logger.info("Edit .env if your MySQL config is different from default")
    return True


def create_database_if_not_exists():
    """Create database if it doesn't exist (MySQL only)"""
    from robotikhub.config import get_settings

    settings = get_settings()
    if settings.is_sqlite:
        return True
    import pymysql

    try:
        # Connect without database to create it
        conn = pymysql.connect(
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password or ''
        )
        cursor = conn.cursor()
        cursor.execute(
            f"CREATE DATABASE IF NOT EXISTS `{settings.db_name}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
        conn.close()
        logger.info(f"Database '{settings.db_name}' ready")
        return True
    except pymysql.MySQLError as e:
        logger.warning(f"Could not create database - {e}")
        return False


def run_migrations():
    """Run alembic migrations"""
    logger.info("Checking for pending migrations...")
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        capture_output=True,
        text=True,
        cwd="."
    )

    if result.returncode != 0:
        logger.warning(f"Migration failed: {result.stderr}")
        return False
    if "Running upgrade" in result.stderr:
        logger.info("Migrations applied successfully!")
    else:
        logger.info("Database is up to date")
    return True


if __name__ == "__main__":
    setup_env_file()
    create_database_if_not_exists()
    run_migrations()

    from robotikhub.config import get_settings
    port = get_settings().port
    logger.info(f"Server starting on http://127.0.0.1:{port}")

    uvicorn.run("robotikhub.main:app", host="0.0.0.0", port=port, reload=True)
