"""
Seed script -- populates the database with sample schools for reviewers.

Run after migrations:
    python seed.py

Creates a dozen schools spread over Mumbai so ``listSchools`` has
something meaningful to rank.
"""

import asyncio

from sqlalchemy import func, select

from school_locator.config import settings
from school_locator.infrastructure.database import (
    build_engine,
    build_session_factory,
)
from school_locator.infrastructure.models import SchoolModel


SCHOOLS = [
    {"name": "Cathedral & John Connon School", "address": "6 Purshottamdas Thakurdas Marg, Fort", "lat": 18.9322, "lng": 72.8318},
    {"name": "Bombay Scottish School", "address": "Veer Savarkar Marg, Mahim", "lat": 19.0405, "lng": 72.8399},
    {"name": "Campion School", "address": "13 Cooperage Road, Fort", "lat": 18.9267, "lng": 72.8300},
    {"name": "Jamnabai Narsee School", "address": "Narsee Monjee Bhavan, Juhu", "lat": 19.1076, "lng": 72.8366},
    {"name": "Dhirubhai Ambani International School", "address": "Bandra Kurla Complex, Bandra East", "lat": 19.0653, "lng": 72.8660},
    {"name": "Hiranandani Foundation School", "address": "Hiranandani Gardens, Powai", "lat": 19.1197, "lng": 72.9081},
    {"name": "Don Bosco High School", "address": "Don Bosco Road, Matunga", "lat": 19.0276, "lng": 72.8565},
    {"name": "St. Mary's School", "address": "Nesbit Road, Mazagaon", "lat": 18.9691, "lng": 72.8376},
    {"name": "Podar International School", "address": "Podar Education Complex, Santacruz West", "lat": 19.0833, "lng": 72.8385},
    {"name": "Ryan International School", "address": "Chandivali Farm Road, Andheri East", "lat": 19.1105, "lng": 72.8930},
    {"name": "Arya Vidya Mandir", "address": "Juhu Tara Road, Juhu", "lat": 19.0990, "lng": 72.8270},
    {"name": "Gopi Birla Memorial School", "address": "Walkeshwar Road, Malabar Hill", "lat": 18.9500, "lng": 72.7980},
]


async def seed(session_factory):
    async with session_factory() as session:
        # Check if already seeded
        result = await session.execute(
            select(func.count()).select_from(SchoolModel)
        )
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        for s in SCHOOLS:
            session.add(
                SchoolModel(
                    name=s["name"],
                    address=s["address"],
                    latitude=s["lat"],
                    longitude=s["lng"],
                )
            )
        await session.commit()
        print(f"  Created {len(SCHOOLS)} schools")
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    engine = build_engine(settings.sqlalchemy_url)
    await seed(build_session_factory(engine))
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
