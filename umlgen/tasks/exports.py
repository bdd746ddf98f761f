from __future__ import annotations
import logging
from sqlalchemy.orm import Session
from umlgen.tasks.celery_app import celery_app
from umlgen.db.session import SessionLocal
from umlgen.db.models import ExportJob
from umlgen.core.workflow import ExportStage, ExportStatus
from umlgen.workspace.manager import WorkspaceManager
from umlgen.core.engine import ExportEngine

log = logging.getLogger(__name__)


def execute_export(db: Session, export_id: str) -> None:
    """Run one export job to completion; failures are recorded on the job row."""
    job = db.get(ExportJob, export_id)
    if not job:
        log.error("Export not found", extra={"export_id": export_id, "stage": "-"})
        return

    try:
        job.status = ExportStatus.RUNNING.value
        db.commit()

        ws = WorkspaceManager(export_id=job.id)
        ws.ensure()

        log.info("Starting export", extra={"export_id": export_id, "stage": str(job.stage)})

        engine = ExportEngine(db=db, workspace=ws, export_id=export_id)
        engine.run(job)
        log.info("Export finished with status %s", job.status,
                 extra={"export_id": export_id, "stage": str(job.stage)})

    except Exception as e:
        log.exception("Export failed", extra={"export_id": export_id, "stage": str(job.stage)})
        db.rollback()
        job = db.get(ExportJob, export_id)
        if job and job.status != ExportStatus.FAILED.value:
            job.status = ExportStatus.FAILED.value
            job.stage = ExportStage.FAILED
            job.error_message = str(e)
            db.commit()


@celery_app.task(name="run_export_job")
def run_export_job(export_id: str) -> None:
    db: Session = SessionLocal()
    try:
        execute_export(db, export_id)
    finally:
        db.close()
