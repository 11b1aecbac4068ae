"""
Initialize database tables and optionally seed demo data
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from app.core.database import SessionLocal, init_db
from app.core.logging_config import configure_logging
from app.models import Candidate, CandidateProcess, Company, Management, Process
import structlog

logger = structlog.get_logger()


def seed_demo_data(db: Session):
    """Create one company with an engagement, a process and two candidates"""
    if db.query(Company).first():
        logger.info("demo_data_exists")
        return

    company = Company(name="Demo Company")
    db.add(company)
    db.flush()

    db.add(Management(company_id=company.id, name="Demo engagement"))

    process = Process(
        company_id=company.id,
        job_offer="Backend Engineer",
        job_offer_description="Python / FastAPI backend role",
    )
    db.add(process)

    candidates = [
        Candidate(name="Ana", last_name="Rojas", email="ana.rojas@example.com"),
        Candidate(name="Luis", last_name="Soto", email="luis.soto@example.com"),
    ]
    db.add_all(candidates)
    db.flush()

    db.add(CandidateProcess(candidate_id=candidates[0].id, process_id=process.id))
    db.commit()

    logger.info("demo_data_created", company_id=company.id, process_id=process.id)


def main():
    """Main initialization function"""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="insert demo rows")
    args = parser.parse_args()

    configure_logging()
    logger.info("initializing_database")

    init_db()

    if not args.seed:
        return

    db: Session = SessionLocal()
    try:
        seed_demo_data(db)
    except Exception as e:
        logger.error("database_seed_failed", error=str(e))
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
