"""
Import tools listed in the awesome-ai README.

Usage:
    python -m tasks.import_awesome_ai
    AWESOME_AI_URL=https://... python -m tasks.import_awesome_ai
"""
import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from services.awesome_ai_service import fetch_readme, import_parsed_tools, parse_readme
from tasks.runner import run_script

FETCH_TIMEOUT_SECONDS = 30.0


async def import_awesome_ai(db: AsyncSession, settings: Settings) -> None:
    """Download, parse and upsert the README entries."""
    async with httpx.AsyncClient(timeout=FETCH_TIMEOUT_SECONDS) as client:
        content = await fetch_readme(client, settings.awesome_ai_url)
    await import_parsed_tools(db, parse_readme(content))


def main() -> None:
    """Entry point for the awesome-ai import as a script."""
    raise SystemExit(run_script("import_awesome_ai", import_awesome_ai))


if __name__ == "__main__":
    main()
