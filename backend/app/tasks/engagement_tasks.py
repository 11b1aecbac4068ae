"""
Engagement reconciliation tasks
"""
from celery import Task
from sqlalchemy.orm import Session
from app.core.celery_app import celery_app
from app.core.database import SessionLocal
from app.candidate_management.lifecycle import reconcile_expired
import structlog

logger = structlog.get_logger()


@celery_app.task(bind=True, max_retries=3)
def reconcile_engagements_task(self: Task):
    """Disengage every active candidate whose end date has passed"""
    db: Session = SessionLocal()
    try:
        flipped = reconcile_expired(db)
        logger.info("engagements_reconciled", disengaged=flipped)
        return flipped
    except Exception as e:
        db.rollback()
        logger.exception("engagement_reconciliation_failed", error=str(e))
        raise self.retry(exc=e, countdown=60)
    finally:
        db.close()
