#!/usr/bin/env python3
"""
Database initialization script for the script generator archive.
Run this to create the SQLite database and all tables.
"""

from .database import db_manager, DATABASE_URL

def init_database():
    """Initialize the database and create all tables"""
    print(f"Initializing generated script archive at {DATABASE_URL}...")

    db_manager.create_tables()

    # Verify tables were created
    from sqlalchemy import inspect
    inspector = inspect(db_manager.engine)
    tables = inspector.get_table_names()

    print(f"✅ Tables ready: {', '.join(tables)}")

if __name__ == "__main__":
    init_database()
