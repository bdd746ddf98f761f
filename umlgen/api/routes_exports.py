from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from umlgen.core.config import settings
from umlgen.core.workflow import ExportStatus
from umlgen.db.session import get_db
from umlgen.db.models import ExportJob
from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE
from umlgen.generators.spring_gen.naming import sanitize_artifact_id, sanitize_package_name
from umlgen.schemas.diagram import DiagramRequest
from umlgen.schemas.exports import ExportResponse
from umlgen.tasks.exports import run_export_job
from umlgen.workspace.manager import WorkspaceManager

router = APIRouter(prefix="/exports")

ARCHIVE_READY_STATUSES = {ExportStatus.DONE.value, ExportStatus.PARTIAL.value}


def _to_response(job: ExportJob) -> ExportResponse:
    return ExportResponse(
        id=job.id,
        project_name=job.project_name,
        package_name=job.package_name,
        stage=job.stage,
        status=job.status,
        error_message=job.error_message,
        artifacts=job.artifacts or {},
    )


def _get_job(db: Session, export_id: str) -> ExportJob:
    job = db.get(ExportJob, export_id)
    if not job:
        raise HTTPException(status_code=404, detail="Export not found")
    return job


@router.post("", response_model=ExportResponse, status_code=202)
def create_export(req: DiagramRequest, db: Session = Depends(get_db)):
    if not req.classes:
        raise HTTPException(status_code=400, detail=EMPTY_DIAGRAM_MESSAGE)

    job = ExportJob(
        project_name=sanitize_artifact_id(req.project_name or settings.default_project_name),
        package_name=sanitize_package_name(req.package_name or settings.default_package_name),
        diagram=req.model_dump(mode="json"),
        status=ExportStatus.QUEUED.value,
        artifacts={},
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    run_export_job.delay(job.id)

    return _to_response(job)


@router.get("/{export_id}", response_model=ExportResponse)
def get_export(export_id: str, db: Session = Depends(get_db)):
    return _to_response(_get_job(db, export_id))


@router.get("/{export_id}/archive")
def download_export(export_id: str, db: Session = Depends(get_db)):
    job = _get_job(db, export_id)
    archive = (job.artifacts or {}).get("archive")
    if job.status not in ARCHIVE_READY_STATUSES or not archive:
        raise HTTPException(status_code=409, detail=f"Export is {job.status}; archive not ready")

    path = WorkspaceManager(export_id=job.id).root / archive
    if not path.exists():
        raise HTTPException(status_code=404, detail="Archive file missing")
    return FileResponse(path, media_type="application/zip", filename=path.name)
