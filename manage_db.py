#!/usr/bin/env python3
"""
Database management script for the tasks service.
Creates, drops and resets the schema of the configured database.
"""

import asyncio
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from app.config import get_settings
from app.infrastructure.db import DatabaseSessionManager


async def create_tables(manager: DatabaseSessionManager):
    """Create all tables that do not exist yet."""
    print(f"Creating tables on {manager.database_url}...")
    await manager.create_tables()


async def drop_tables(manager: DatabaseSessionManager):
    """Drop all tables - WARNING: This will drop all data!"""
    print(f"Dropping tables on {manager.database_url}...")
    await manager.drop_tables()


async def reset_database(manager: DatabaseSessionManager):
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        await drop_tables(manager)
        await create_tables(manager)
    else:
        print("Database reset cancelled.")


async def check_connection(manager: DatabaseSessionManager):
    """Check that the database answers."""
    ok = await manager.health_check()
    print("Database is reachable." if ok else "Database is NOT reachable.")


COMMANDS = {
    "create": create_tables,
    "drop": drop_tables,
    "reset": reset_database,
    "check": check_connection,
}


async def run(command_name: str):
    settings = get_settings()
    manager = DatabaseSessionManager(settings.database_url, echo=settings.database_echo)
    try:
        await COMMANDS[command_name](manager)
    finally:
        await manager.close()


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create missing tables")
        print("  drop           - Drop all tables (WARNING: drops all data)")
        print("  reset          - Drop and recreate tables (asks for confirmation)")
        print("  check          - Check the database connection")
        return

    command_name = sys.argv[1]

    if command_name not in COMMANDS:
        print(f"Unknown command: {command_name}")
        sys.exit(1)

    asyncio.run(run(command_name))


if __name__ == "__main__":
    main()
