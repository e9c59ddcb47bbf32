"""
Freelancer Platform Database Seeder

Creates an admin account, a client account and a handful of demo
freelancer profiles so the frontend has something to show.
"""

import sys
sys.path.insert(0, ".")

from freelancer_platform.db.session import SessionLocal, engine
from freelancer_platform.db.base import Base
from freelancer_platform.models import User, Freelancer, Setting
from freelancer_platform.core.security import get_password_hash

DEMO_FREELANCERS = [
    {
        "name": "Maria Santos",
        "email": "maria.santos@example.com",
        "phone": "+1 555 0101",
        "skills": ["React", "TypeScript", "Tailwind"],
        "hourly_rate": 65,
        "experience_years": 6,
        "bio": "Frontend engineer focused on design systems.",
        "portfolio_url": "https://example.com/maria",
        "availability": "full-time",
        "status": "active",
    },
    {
        "name": "Kwame Mensah",
        "email": "kwame.mensah@example.com",
        "skills": ["Python", "FastAPI", "PostgreSQL"],
        "hourly_rate": 80,
        "experience_years": 9,
        "bio": "Backend developer, APIs and data pipelines.",
        "availability": "part-time",
        "status": "active",
    },
    {
        "name": "Lena Fischer",
        "email": "lena.fischer@example.com",
        "skills": ["Figma", "UX Research"],
        "hourly_rate": 55,
        "experience_years": 4,
        "status": "pending",
    },
]


def seed_database():
    """Seed the database with test data."""

    # Create all tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if already seeded
        existing_admin = db.query(User).filter(User.email == "admin@freelancer.local").first()
        if existing_admin:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        admin = User(
            email="admin@freelancer.local",
            hashed_password=get_password_hash("admin123"),
            full_name="Platform Admin",
            role="admin",
        )
        client = User(
            email="client@example.com",
            hashed_password=get_password_hash("client123"),
            full_name="Demo Client",
            role="client",
        )
        db.add_all([admin, client])
        db.flush()  # Get IDs

        for data in DEMO_FREELANCERS:
            db.add(Freelancer(**data, user_id=admin.id))

        db.add(
            Setting(
                key="platform",
                value={"name": "Freelancer Platform", "currency": "USD"},
                description="General platform preferences",
                updated_by=admin.id,
            )
        )

        db.commit()

        print("Database seeded successfully!")
        print("\nCreated Users:")
        print("   - admin@freelancer.local (password: admin123) [admin]")
        print("   - client@example.com (password: client123) [client]")
        print(f"\nCreated {len(DEMO_FREELANCERS)} freelancer profiles")

    except Exception as e:
        db.rollback()
        print(f"Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
