#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the users and meals tables in the database pointed to by DATABASE_URL.
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("dailydiet.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
    except Exception:
        logger.exception("Database initialization failed for %s", settings.database_url)
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Daily Diet Database Initialization")
    print("=" * 60)
    print(f"\nDatabase: {settings.database_url}")
    print("This will create the 'users' and 'meals' tables if missing.\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Your database is ready to use.")
    else:
        print("FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
