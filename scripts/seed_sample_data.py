import sys
import os
from datetime import timedelta

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from app.core import clock
from app.core.logging import configure_logging
from app.infrastructure.database import Base, SessionLocal, engine
from app.domain.models.client import Client
from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.transaction import Transaction
from app.domain.models.user import User

logger = structlog.get_logger("seed_sample_data")


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Client.id).first() is not None:
            logger.info("Sample data skipped: clients table is not empty")
            return

        now = clock.now()
        today = now.date()

        user = User(name="Alex Morgan", email="alex@example.com")
        acme = Client(
            company_name="Acme Corp",
            contact_person="Jane Doe",
            email="jane@acme.example",
            country="US",
            social_contacts='{"whatsapp": "+15550100", "linkedin": "acme-corp"}',
        )
        globex = Client(company_name="Globex", contact_person="Hank Scorpio", email="hank@globex.example")
        db.add_all([user, acme, globex])
        db.flush()

        website = Project(
            title="Website redesign",
            client_id=acme.id,
            status="in_progress",
            start_date=today - timedelta(days=20),
            end_date=today + timedelta(days=40),
            budget=5000,
        )
        shop = Project(
            title="Online shop",
            client_id=globex.id,
            status="completed",
            start_date=today - timedelta(days=90),
            end_date=today - timedelta(days=10),
            budget=12000,
        )
        db.add_all([website, shop])
        db.flush()

        db.add_all([
            Task(
                title="Homepage mockups",
                project_id=website.id,
                client_id=acme.id,
                assigned_to=user.id,
                status="completed",
                type="design",
                due_date=today - timedelta(days=5),
                budget=800,
            ),
            Task(
                title="Checkout fixes",
                project_id=shop.id,
                client_id=globex.id,
                status="in_progress",
                priority="high",
                type="fixing",
                due_date=today + timedelta(days=7),
            ),
            Transaction(type="payment", amount=2500, description="Deposit", project_id=website.id,
                        status="completed", date=now - timedelta(days=15)),
            Transaction(type="invoice", amount=2500, description="Second milestone", project_id=website.id,
                        status="pending", date=now - timedelta(days=2)),
            Transaction(type="expense", amount=300, description="Stock photos", project_id=website.id,
                        status="completed", date=now - timedelta(days=10)),
            Transaction(type="payment", amount=12000, description="Final payment", project_id=shop.id,
                        status="completed", date=now - timedelta(days=8)),
        ])
        db.commit()
        logger.info("Sample data added", clients=2, projects=2, tasks=2, transactions=4)

    except Exception:
        db.rollback()
        logger.exception("Seeding sample data failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    seed()
