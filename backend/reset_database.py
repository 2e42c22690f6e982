"""
Script to drop and recreate every table, optionally loading the sample data.
All existing data is lost.
Run with: python reset_database.py [--seed]
"""
import asyncio
import sys

from app.core.logging import setup_logging
from app.db import session as db_session
from app.db.init_db import reset_schema, seed_sample_data
from app.db.session import close_db, init_db


async def reset_database(seed: bool) -> int:
    """Reset the schema and seed it when requested."""
    setup_logging()
    await init_db()

    try:
        await reset_schema(db_session.engine)
        print("Schema reset")

        if seed:
            async with db_session.async_session_maker() as session:
                await seed_sample_data(session)
            print("Sample data loaded")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await close_db()


if __name__ == "__main__":
    seed = "--seed" in sys.argv[1:]
    exit_code = asyncio.run(reset_database(seed))
    sys.exit(exit_code)
