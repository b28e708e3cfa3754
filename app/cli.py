"""CLI commands for management tasks."""

import asyncio
import sys

from app.core.database import Base, async_session_maker, engine
from app.schemas.school import SchoolCreate
from app.services import school as school_service

# Register all tables on Base.metadata
import app.models  # noqa: F401


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

    print("✓ Database tables created")


async def create_school(
    name: str,
    address: str,
    phone: str | None = None,
    email: str | None = None,
) -> None:
    """Create the school record."""
    async with async_session_maker() as db:
        # Single-school system: only one record is ever read
        existing_school = await school_service.get_school(db)

        if existing_school:
            print("Error: A school already exists!")
            print(f"School: {existing_school.name} (id {existing_school.id})")
            sys.exit(1)

        school = await school_service.create_school(
            db,
            SchoolCreate(name=name, address=address, phone=phone, email=email),
        )

        print("✓ School created successfully!")
        print(f"  ID: {school.id}")
        print(f"  Name: {school.name}")
        print(f"  Address: {school.address}")


def main() -> None:
    """CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: python -m app.cli <command>")
        print("Commands:")
        print("  init-db")
        print("  create-school <name> <address> [phone] [email]")
        sys.exit(1)

    command = sys.argv[1]

    if command == "init-db":
        asyncio.run(init_db())
    elif command == "create-school":
        if not 4 <= len(sys.argv) <= 6:
            print("Usage: python -m app.cli create-school <name> <address> [phone] [email]")
            sys.exit(1)

        name, address, *optional = sys.argv[2:]
        phone = optional[0] if len(optional) > 0 else None
        email = optional[1] if len(optional) > 1 else None
        asyncio.run(create_school(name, address, phone, email))
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
