"""Tests for the export workflow: stage agents, engine and task body."""
import json
import tempfile
import zipfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from umlgen.agents.base import BaseAgent
from umlgen.agents.impl_generate import ProjectGeneratorAgent
from umlgen.agents.impl_package import ArchivePackagerAgent
from umlgen.agents.impl_validate import DiagramValidationAgent
from umlgen.agents.registry import AgentRegistry
from umlgen.core.engine import ExportEngine
from umlgen.core.workflow import ExportStage, ExportStatus
from umlgen.db.models import ExportJob
from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE
from umlgen.tasks.exports import execute_export
from umlgen.workspace.manager import WorkspaceManager


def _mock_job(diagram, project_name="library-api", package_name="com.example.library"):
    job = MagicMock()
    job.id = "test-export"
    job.diagram = diagram
    job.project_name = project_name
    job.package_name = package_name
    return job


def _workspace(temp_dir):
    ws = WorkspaceManager(export_id="test-export", base_dir=Path(temp_dir))
    ws.ensure()
    return ws


def test_validation_rejects_empty_diagram():
    with tempfile.TemporaryDirectory() as temp_dir:
        result = DiagramValidationAgent().run(_mock_job({"classes": []}), _workspace(temp_dir))
    assert not result.ok
    assert result.message == EMPTY_DIAGRAM_MESSAGE


def test_validation_rejects_malformed_diagram():
    with tempfile.TemporaryDirectory() as temp_dir:
        result = DiagramValidationAgent().run(_mock_job({"classes": [{"attributes": []}]}), _workspace(temp_dir))
    assert not result.ok
    assert result.message.startswith("Invalid diagram")


def test_agents_produce_project_and_archive(library_diagram):
    """validate -> generate -> package leaves a zip with the whole project."""
    with tempfile.TemporaryDirectory() as temp_dir:
        ws = _workspace(temp_dir)
        job = _mock_job(library_diagram)

        validated = DiagramValidationAgent().run(job, ws)
        assert validated.ok, validated.message
        assert validated.artifacts_index["diagram"] == "workspace/diagram.json"
        assert (ws.artifacts_dir / "diagram.json").exists()

        generated = ProjectGeneratorAgent().run(job, ws)
        assert generated.ok, generated.message
        assert generated.artifacts_index["file_count"] == 18
        assert generated.artifacts_index["failed_artifacts"] == 0
        assert "failure_summary" not in generated.artifacts_index
        assert (ws.project_dir / "src/main/java/com/example/library/model/Author.java").exists()

        report = json.loads((ws.artifacts_dir / "generation-report.json").read_text(encoding="utf-8"))
        assert "pom.xml" in report["files"]
        assert report["failures"] == []

        packaged = ArchivePackagerAgent().run(job, ws)
        assert packaged.ok, packaged.message
        assert packaged.artifacts_index["archive"] == "library-api.zip"
        with zipfile.ZipFile(ws.root / "library-api.zip") as zf:
            assert "src/main/java/com/example/library/dto/BookDTO.java" in zf.namelist()


def test_generator_requires_validated_diagram():
    with tempfile.TemporaryDirectory() as temp_dir:
        result = ProjectGeneratorAgent().run(_mock_job({}), _workspace(temp_dir))
    assert not result.ok
    assert "diagram.json" in result.message


def test_packager_refuses_empty_project():
    with tempfile.TemporaryDirectory() as temp_dir:
        result = ArchivePackagerAgent().run(_mock_job({}), _workspace(temp_dir))
    assert not result.ok


class _StubAgent(BaseAgent):
    def __init__(self, stage, ok=True, message="ok", **artifacts):
        self.stage = stage
        self._ok = ok
        self._message = message
        self._artifacts = artifacts

    def run(self, job, ws):
        if self._ok:
            return self.succeed(self._message, **self._artifacts)
        return self.fail(self._message, **self._artifacts)


def _stub_registry(**overrides):
    mapping = {stage: _StubAgent(stage) for stage in (
        ExportStage.VALIDATE_DIAGRAM, ExportStage.GENERATE_PROJECT, ExportStage.PACKAGE_ARCHIVE,
    )}
    mapping.update(overrides)
    return AgentRegistry(mapping=mapping)


def _persisted_job(db, diagram=None):
    job = ExportJob(
        project_name="library-api",
        package_name="com.example.library",
        diagram=diagram or {"classes": [{"name": "A"}]},
        artifacts={},
    )
    db.add(job)
    db.commit()
    return job


def test_engine_marks_done(db_session):
    job = _persisted_job(db_session)
    with tempfile.TemporaryDirectory() as temp_dir:
        ExportEngine(db_session, _workspace(temp_dir), job.id, registry=_stub_registry()).run(job)

    assert job.status == ExportStatus.DONE.value
    assert job.stage == ExportStage.DONE
    assert job.error_message is None


def test_engine_marks_partial_with_aggregate_message(db_session):
    """Failed artifacts still package, but the export reports one aggregate message."""
    registry = _stub_registry(**{
        ExportStage.GENERATE_PROJECT: _StubAgent(
            ExportStage.GENERATE_PROJECT, failed_artifacts=1, failure_summary="Failed to generate 1 artifact(s): x"
        ),
    })
    job = _persisted_job(db_session)
    with tempfile.TemporaryDirectory() as temp_dir:
        ExportEngine(db_session, _workspace(temp_dir), job.id, registry=registry).run(job)

    assert job.status == ExportStatus.PARTIAL.value
    assert job.error_message == "Failed to generate 1 artifact(s): x"
    assert job.artifacts["failed_artifacts"] == 1


def test_engine_stops_on_failed_stage(db_session):
    packager = MagicMock()
    registry = _stub_registry(**{
        ExportStage.GENERATE_PROJECT: _StubAgent(ExportStage.GENERATE_PROJECT, ok=False, message="boom"),
        ExportStage.PACKAGE_ARCHIVE: packager,
    })
    job = _persisted_job(db_session)
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(RuntimeError, match="boom"):
            ExportEngine(db_session, _workspace(temp_dir), job.id, registry=registry).run(job)

    assert job.status == ExportStatus.FAILED.value
    assert job.stage == ExportStage.FAILED
    assert job.error_message == "boom"
    packager.run.assert_not_called()


def test_execute_export_runs_full_pipeline(db_session, library_diagram):
    job = _persisted_job(db_session, diagram=library_diagram)
    execute_export(db_session, job.id)

    job = db_session.get(ExportJob, job.id)
    assert job.status == ExportStatus.DONE.value, job.error_message
    assert job.stage == ExportStage.DONE
    archive = WorkspaceManager(export_id=job.id).root / job.artifacts["archive"]
    assert archive.exists()


def test_execute_export_records_empty_diagram(db_session):
    job = _persisted_job(db_session, diagram={"classes": [], "relations": []})
    execute_export(db_session, job.id)

    job = db_session.get(ExportJob, job.id)
    assert job.status == ExportStatus.FAILED.value
    assert job.error_message == EMPTY_DIAGRAM_MESSAGE


def test_execute_export_ignores_unknown_id(db_session):
    execute_export(db_session, "does-not-exist")
