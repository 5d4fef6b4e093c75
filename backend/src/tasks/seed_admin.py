"""
Create or reset the admin account.

Usage:
    ADMIN_EMAIL=... ADMIN_PASSWORD=... python -m tasks.seed_admin
"""
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from services.seed_service import seed_admin_user
from tasks.runner import run_script


async def seed_admin(db: AsyncSession, settings: Settings) -> None:
    """Upsert the admin user from settings."""
    await seed_admin_user(
        db,
        email=settings.admin_email,
        password=settings.admin_password,
        name=settings.admin_name,
    )


def main() -> None:
    """Entry point for seeding the admin user as a script."""
    raise SystemExit(run_script("seed_admin", seed_admin))


if __name__ == "__main__":
    main()
