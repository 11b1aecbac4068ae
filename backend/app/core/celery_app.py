"""
Celery application for background engagement reconciliation
"""
from celery import Celery
from app.core.config import settings

celery_app = Celery(
    "gipit",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=[
        "app.tasks.engagement_tasks",
    ],
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes
    task_soft_time_limit=240,  # 4 minutes
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    result_expires=3600,  # 1 hour
    beat_schedule={
        "reconcile-expired-engagements": {
            "task": "app.tasks.engagement_tasks.reconcile_engagements_task",
            "schedule": settings.DISENGAGEMENT_SWEEP_MINUTES * 60.0,
        },
    },
)
