import json
import logging
from umlgen.agents.base import BaseAgent
from umlgen.core.config import settings
from umlgen.core.workflow import ExportStage
from umlgen.generators.spring_gen import GeneratorError, generate_project, write_files
from umlgen.schemas.diagram import DiagramRequest

log = logging.getLogger(__name__)


class ProjectGeneratorAgent(BaseAgent):
    stage = ExportStage.GENERATE_PROJECT

    def run(self, job, ws):
        diagram_path = ws.artifacts_dir / "diagram.json"
        if not diagram_path.exists():
            return self.fail("diagram.json not found in workspace artifacts")

        diagram = DiagramRequest.model_validate_json(diagram_path.read_text(encoding="utf-8"))
        classes, relations = diagram.to_definitions()
        options = diagram.generator_options(
            default_package_name=job.package_name,
            default_project_name=job.project_name,
            java_version=settings.java_version,
            spring_boot_version=settings.spring_boot_version,
            base_url=settings.generated_base_url,
        )

        try:
            result = generate_project(classes, relations, options)
        except GeneratorError as e:
            return self.fail(f"Project generation failed: {e}")

        write_files(result.files, ws.project_dir)

        report_path = ws.artifacts_dir / "generation-report.json"
        report = {
            "files": sorted(result.files),
            "warnings": result.warnings,
            "failures": [{"path": f.path, "message": f.message} for f in result.failures],
        }
        report_path.write_text(json.dumps(report, indent=2), encoding="utf-8")

        for warning in result.warnings:
            log.warning(warning, extra={"export_id": job.id, "stage": str(self.stage)})

        artifacts = {
            "project_dir": str(ws.project_dir.relative_to(ws.root)),
            "generation_report": str(report_path.relative_to(ws.root)),
            "file_count": len(result.files),
            "failed_artifacts": len(result.failures),
        }
        if not result.ok:
            artifacts["failure_summary"] = result.failure_summary()
        return self.succeed(f"Generated {len(result.files)} project files", **artifacts)
