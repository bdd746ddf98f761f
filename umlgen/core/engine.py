from __future__ import annotations
import logging
from typing import Optional
from sqlalchemy.orm import Session
from umlgen.core.workflow import ExportStage, ExportStatus, PIPELINE
from umlgen.db.models import ExportJob
from umlgen.workspace.manager import WorkspaceManager
from umlgen.agents.registry import AgentRegistry

log = logging.getLogger(__name__)

class ExportEngine:
    def __init__(self, db: Session, workspace: WorkspaceManager, export_id: str,
                 registry: Optional[AgentRegistry] = None):
        self.db = db
        self.ws = workspace
        self.export_id = export_id
        self.registry = registry or AgentRegistry.default()

    def _set_stage(self, job: ExportJob, stage: ExportStage) -> None:
        job.stage = stage
        self.db.commit()

    def _merge_artifacts(self, job: ExportJob, updates: dict) -> None:
        current = dict(job.artifacts or {})
        current.update(updates)
        job.artifacts = current
        self.db.commit()

    def run(self, job: ExportJob) -> None:
        for stage in PIPELINE:
            self._set_stage(job, stage)
            log.info("Running stage", extra={"export_id": self.export_id, "stage": str(stage)})

            agent = self.registry.get(stage)
            result = agent.run(job=job, ws=self.ws)

            self._merge_artifacts(job, result.artifacts_index)

            if not result.ok:
                log.error("Stage failed: %s", result.message,
                          extra={"export_id": self.export_id, "stage": str(stage)})
                job.status = ExportStatus.FAILED.value
                job.error_message = result.message
                job.stage = ExportStage.FAILED
                self.db.commit()
                raise RuntimeError(result.message)

        # partial output is still packaged; surface one aggregate message
        if job.artifacts.get("failed_artifacts"):
            job.status = ExportStatus.PARTIAL.value
            job.error_message = job.artifacts.get("failure_summary")
        else:
            job.status = ExportStatus.DONE.value
        job.stage = ExportStage.DONE
        self.db.commit()
