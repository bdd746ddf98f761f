from umlgen.agents.base import BaseAgent
from umlgen.core.workflow import ExportStage
from umlgen.generators.spring_gen.naming import sanitize_artifact_id
from umlgen.generators.spring_gen.writer import archive_directory


class ArchivePackagerAgent(BaseAgent):
    """Zips whatever the generator stage wrote, including partial output."""
    stage = ExportStage.PACKAGE_ARCHIVE

    def run(self, job, ws):
        if not ws.project_dir.exists() or not any(ws.project_dir.iterdir()):
            return self.fail("No generated project files to package")

        archive_path = ws.archive_path(sanitize_artifact_id(job.project_name))
        archive_directory(ws.project_dir, archive_path)
        return self.succeed(
            f"Packaged {archive_path.name}",
            archive=str(archive_path.relative_to(ws.root)),
        )
