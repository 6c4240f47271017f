"""Seed the development database with sample keyword rules.

Creates the CallWatch schema if needed and inserts a small set of
rules through the rule store. Uses ``CW_DB_URI`` (see ``cw_common.config``).

Usage:
    python scripts/seed_db.py
"""

import asyncio

import structlog

from cw_common.config import get_settings
from cw_common.db import build_engine, build_session_factory, init_db
from cw_common.logging import configure_logging
from storage import RuleStore

logger = structlog.get_logger("seed_db")

SAMPLE_RULES = [
    {"name": "distress", "keywords": ["help", "emergency", "mayday"]},
    {"name": "weapons", "keywords": ["gun", "knife", "weapon"]},
    {"name": "fire", "keywords": ["fire", "smoke"]},
    {"name": "medical", "keywords": ["ambulance", "not breathing", "overdose"]},
    {"name": "billing", "keywords": ["refund", "complaint"], "enabled": False},
]


async def main() -> None:
    """Create tables and seed the sample rules."""
    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    engine = build_engine(settings.db_uri)
    await init_db(engine)
    factory = build_session_factory(engine)
    async with factory() as session:
        store = RuleStore(session)
        for entry in SAMPLE_RULES:
            await store.create(entry["name"], entry["keywords"], enabled=entry.get("enabled", True))
    await engine.dispose()
    logger.info("seed_complete", rules=len(SAMPLE_RULES), db_uri=settings.db_uri)


if __name__ == "__main__":
    asyncio.run(main())
