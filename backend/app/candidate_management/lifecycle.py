"""
Engagement lifecycle - status derivation, one-shot disengagement jobs
and the reconciliation sweep
"""
from datetime import datetime, timezone
from typing import Callable, List, Optional

from apscheduler.events import EVENT_JOB_MISSED
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger
from sqlalchemy import update
from sqlalchemy.orm import Session
import structlog

from app.models.candidate_management import CandidateManagement, EngagementStatus

logger = structlog.get_logger()

JOB_PREFIX = "disengage-"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive values (SQLite hands these back) are UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def derive_status(end_date: Optional[datetime]) -> EngagementStatus:
    """
    Initial status of a new engagement.

    Any end date, past or future, gives ACTIVE; no end date gives DISENGAGED.
    """
    # Looks inverted (open-ended engagements start disengaged). Existing
    # clients rely on it, so it stays until the business rule is confirmed.
    if end_date is not None:
        return EngagementStatus.ACTIVE
    return EngagementStatus.DISENGAGED


class DisengagementScheduler:
    """
    One-shot APScheduler jobs flipping a record to DISENGAGED at its end date.

    Fire-and-forget: a job is never cancelled when its record is updated or
    deleted, and the in-memory job store is lost on restart.
    ``reconcile_expired`` is the durable counterpart run by Celery beat.
    """

    def __init__(self, session_factory: Callable[[], Session], enabled: bool = True):
        self._session_factory = session_factory
        self._enabled = enabled
        self.scheduler = self._build_scheduler()

    def _build_scheduler(self) -> BackgroundScheduler:
        # In-memory job store: pending jobs do not survive a restart
        scheduler = BackgroundScheduler(timezone=timezone.utc)
        scheduler.add_listener(self._on_missed, EVENT_JOB_MISSED)
        return scheduler

    @staticmethod
    def job_id(record_id: int) -> str:
        return f"{JOB_PREFIX}{record_id}"

    def start(self) -> None:
        """Start the background scheduler; tied to application startup"""
        if not self.scheduler.running:
            self.scheduler.start()
            logger.info("disengagement_scheduler_started")

    def shutdown(self) -> int:
        """Drop pending jobs and stop; returns how many jobs were dropped"""
        dropped = self.cancel_all()
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("disengagement_scheduler_stopped", dropped=dropped)
            # A shut-down scheduler cannot be restarted with its old executor
            self.scheduler = self._build_scheduler()
        return dropped

    def schedule(self, record_id: int, end_date: datetime, now: Optional[datetime] = None) -> bool:
        """Arm a job at ``end_date``; returns False when nothing was armed"""
        if not self._enabled:
            return False

        run_date = as_utc(end_date)
        if run_date <= as_utc(now or utcnow()):
            return False

        job_id = self.job_id(record_id)
        if self.scheduler.get_job(job_id) is not None:
            return False

        self.scheduler.add_job(
            self._fire,
            DateTrigger(run_date=run_date, timezone=timezone.utc),
            args=[record_id],
            id=job_id,
            misfire_grace_time=None,  # run late rather than never
        )
        logger.info("disengagement_scheduled", record_id=record_id, run_date=run_date.isoformat())
        return True

    def pending(self) -> List[int]:
        return sorted(
            int(job.id[len(JOB_PREFIX):])
            for job in self.scheduler.get_jobs()
            if job.id.startswith(JOB_PREFIX)
        )

    def cancel_all(self) -> int:
        """Remove every pending job"""
        count = len(self.scheduler.get_jobs())
        self.scheduler.remove_all_jobs()
        return count

    def _on_missed(self, event) -> None:
        logger.warning("disengagement_job_missed", job_id=event.job_id)

    def _fire(self, record_id: int) -> None:
        db = self._session_factory()
        try:
            record = db.get(CandidateManagement, record_id)
            if record is None:
                logger.error("disengagement_target_missing", record_id=record_id)
                return
            record.status = EngagementStatus.DISENGAGED.value
            db.commit()
            logger.info("candidate_disengaged", record_id=record_id, source="scheduler")
        except Exception as e:
            # Best-effort: the creating request returned long ago
            db.rollback()
            logger.exception("disengagement_failed", record_id=record_id, error=str(e))
        finally:
            db.close()


def reconcile_expired(db: Session, now: Optional[datetime] = None) -> int:
    """
    Flip every ACTIVE record whose end date has passed to DISENGAGED.

    Idempotent; returns the number of records changed.
    """
    cutoff = as_utc(now or utcnow())
    result = db.execute(
        update(CandidateManagement)
        .where(
            CandidateManagement.status == EngagementStatus.ACTIVE.value,
            CandidateManagement.end_date.isnot(None),
            CandidateManagement.end_date <= cutoff,
        )
        .values(status=EngagementStatus.DISENGAGED.value)
        .execution_options(synchronize_session=False)
    )
    db.commit()

    flipped = result.rowcount or 0
    if flipped:
        logger.info("candidates_disengaged", count=flipped, source="sweep", cutoff=cutoff.isoformat())
    return flipped
