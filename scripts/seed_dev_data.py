#!/usr/bin/env python3
"""Seed a development database with a business, its representative and services.

Run after ``alembic upgrade head``. Prints the ids and the login needed to
try the API locally.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from appointme.database import async_session_maker, engine
from appointme.models import UserRole
from appointme.stores import SqlBookingStore
from appointme.utils.passwords import hash_password

REP_EMAIL = "rep@brightminds.com"
REP_PASSWORD = "Tutor1234!"


async def seed_dev_data():
    """Create one business with three services and a representative."""
    async with async_session_maker() as session:
        store = SqlBookingStore(session)
        try:
            if await store.get_user_by_email(REP_EMAIL):
                print(f"Seed data already present ({REP_EMAIL} exists)")
                return

            business = await store.create_business(
                {
                    "name": "Bright Minds Tutoring",
                    "email": "hello@brightminds.com",
                    "phone": "+15550100000",
                    "description": "Comprehensive tutoring services to meet your needs.",
                }
            )
            print(f"Created business: {business.name} (ID: {business.id})")

            services = [
                ("1:1 Maths", "Individual maths tutoring", 50, 10, 60.0),
                ("Group English", "Small group English class", 80, 10, 35.0),
                ("Exam Prep", "Intensive exam preparation", 110, 10, 90.0),
            ]
            for name, description, duration, break_minutes, fee in services:
                await store.create_service(
                    business.id,
                    {
                        "name": name,
                        "description": description,
                        "duration": duration,
                        "break_minutes": break_minutes,
                        "fee": fee,
                    },
                )
            print(f"Created {len(services)} services")

            rep = await store.create_user(
                {
                    "fname": "Test",
                    "lname": "Rep",
                    "email": REP_EMAIL,
                    "password_hash": hash_password(REP_PASSWORD),
                    "role": UserRole.BUSINESS_REP.value,
                    "business_id": business.id,
                }
            )
            print(f"Created representative: {rep.email} (ID: {rep.id})")

            await store.commit()

            print("\nSeed complete. Log in with:")
            print(f"  POST /api/auth/login/businessRep  {REP_EMAIL} / {REP_PASSWORD}")
        except Exception as e:
            await session.rollback()
            print(f"Error seeding data: {e}")
            raise
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_dev_data())
