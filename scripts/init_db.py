"""
Database initialization script.

Creates the tables and, optionally, the first admin account.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --admin-email admin@club.nz --admin-password 's3cret-pass'
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from app.db.init_db import init_db

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and seed the admin user.")
    parser.add_argument("--admin-email", default=None)
    parser.add_argument("--admin-password", default=None)
    args = parser.parse_args()

    print("=" * 50)
    print("North Harbour Performance - Database Initialization")
    print("=" * 50)

    try:
        init_db(args.admin_email, args.admin_password)
    except SQLAlchemyError as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
