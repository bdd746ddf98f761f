import json
import logging
from pydantic import ValidationError
from umlgen.agents.base import BaseAgent
from umlgen.core.workflow import ExportStage
from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE
from umlgen.schemas.diagram import DiagramRequest

log = logging.getLogger(__name__)


class DiagramValidationAgent(BaseAgent):
    """Checks the stored diagram and writes the normalized copy used by later stages."""
    stage = ExportStage.VALIDATE_DIAGRAM

    def run(self, job, ws):
        try:
            diagram = DiagramRequest.model_validate(job.diagram or {})
        except ValidationError as e:
            return self.fail(f"Invalid diagram: {e.error_count()} validation error(s)")

        if not diagram.classes:
            return self.fail(EMPTY_DIAGRAM_MESSAGE)

        artifact_path = ws.artifacts_dir / "diagram.json"
        artifact_path.write_text(
            json.dumps(diagram.model_dump(mode="json"), indent=2), encoding="utf-8"
        )
        log.info(
            "Validated diagram with %d classes, %d relations",
            len(diagram.classes), len(diagram.relations),
            extra={"export_id": job.id, "stage": str(self.stage)},
        )
        return self.succeed(
            f"Diagram has {len(diagram.classes)} classes and {len(diagram.relations)} relations",
            diagram=str(artifact_path.relative_to(ws.root)),
        )
