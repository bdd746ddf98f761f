import logging
from fastapi import APIRouter, HTTPException, Response
from umlgen.core.config import settings
from umlgen.generators.spring_gen import GenerationResult, build_archive, generate_project
from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE
from umlgen.generators.spring_gen.naming import sanitize_artifact_id
from umlgen.schemas.diagram import ArtifactFailureOut, DiagramRequest, GenerationPreview

router = APIRouter(prefix="/generate")
log = logging.getLogger(__name__)


def _generate(req: DiagramRequest) -> tuple[GenerationResult, str]:
    # refuse before the generator is ever invoked
    if not req.classes:
        raise HTTPException(status_code=400, detail=EMPTY_DIAGRAM_MESSAGE)

    classes, relations = req.to_definitions()
    options = req.generator_options(
        default_package_name=settings.default_package_name,
        default_project_name=settings.default_project_name,
        java_version=settings.java_version,
        spring_boot_version=settings.spring_boot_version,
        base_url=settings.generated_base_url,
    )
    result = generate_project(classes, relations, options)
    if not result.ok:
        log.error(result.failure_summary())
    return result, options.project_name


@router.post("", response_class=Response)
def generate_archive(req: DiagramRequest):
    result, project_name = _generate(req)
    if not result.files:
        raise HTTPException(status_code=500, detail=result.failure_summary())

    filename = f"{sanitize_artifact_id(project_name)}.zip"
    headers = {
        "Content-Disposition": f'attachment; filename="{filename}"',
        "X-Generation-Failures": str(len(result.failures)),
        "X-Generation-Warnings": str(len(result.warnings)),
    }
    return Response(content=build_archive(result.files), media_type="application/zip", headers=headers)


@router.post("/preview", response_model=GenerationPreview)
def generate_preview(req: DiagramRequest):
    result, _ = _generate(req)
    return GenerationPreview(
        files=result.files,
        warnings=result.warnings,
        failures=[ArtifactFailureOut(path=f.path, message=f.message) for f in result.failures],
    )
