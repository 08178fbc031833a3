"""
Seed the database with friends, addresses, pets and shared quotes.
Run from the repository root: python scripts/seed_db.py --count 100 [--seed 42] [--remove]
"""
import argparse
import asyncio
import logging
import random

from goodfriends.api.db.session import async_session
from goodfriends.api.services.seed import remove_seed, seed

logger = logging.getLogger(__name__)


async def main(count: int, rng_seed: int | None, remove: bool) -> None:
    async with async_session() as db:
        if remove:
            await remove_seed(db, seeded=True)
        created = await seed(db, count, random.Random(rng_seed))
        await db.commit()
    logger.info("Done: %d friends created", created)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None, help="random seed for repeatable data")
    parser.add_argument("--remove", action="store_true", help="remove existing seeded rows first")
    opts = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(opts.count, opts.seed, opts.remove))
