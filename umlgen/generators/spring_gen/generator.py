"""Orchestrator for Spring Boot project generation."""
import logging
from dataclasses import replace
from typing import Callable, Iterable, Optional

from umlgen.generators.spring_gen.naming import sanitize_artifact_id, sanitize_package_name
from umlgen.generators.spring_gen.planner import RelationshipPlanner
from umlgen.generators.spring_gen.render import (
    render_application_java,
    render_application_properties,
    render_model_mapper_config,
    render_not_found_exception,
    render_pom_xml,
    render_readme,
)
from umlgen.generators.spring_gen.render_entity import (
    render_controller,
    render_dto,
    render_entity,
    render_repository,
    render_service,
)
from umlgen.generators.spring_gen.sample_payload import (
    render_postman_collection,
    render_postman_environment,
)
from umlgen.generators.spring_gen.types import (
    ArtifactFailure,
    ClassDefinition,
    GenerationResult,
    GeneratorOptions,
    RelationDefinition,
)

log = logging.getLogger(__name__)

EMPTY_DIAGRAM_MESSAGE = "The diagram has no classes to generate"


class GeneratorError(Exception):
    """Base error for project generation."""


class EmptyDiagramError(GeneratorError):
    """Raised when there are no classes to generate from."""


# (sub-package, file name pattern, renderer) for every per-class artifact
ENTITY_ARTIFACTS = (
    ("model", "{name}.java", render_entity),
    ("dto", "{name}DTO.java", render_dto),
    ("repository", "{name}Repository.java", render_repository),
    ("service", "{name}Service.java", render_service),
    ("controller", "{name}Controller.java", render_controller),
)


def artifact_path(options: GeneratorOptions, package: str, file_name: str) -> str:
    return f"{options.java_root}/{package}/{file_name}"


def normalize_options(options: Optional[GeneratorOptions]) -> GeneratorOptions:
    options = options or GeneratorOptions()
    return replace(
        options,
        package_name=sanitize_package_name(options.package_name),
        project_name=sanitize_artifact_id(options.project_name),
    )


def _emit(result: GenerationResult, path: str, render: Callable[..., str], *args) -> None:
    """Render one artifact; a failure is recorded and does not stop the run."""
    try:
        result.files[path] = render(*args)
    except Exception as e:
        log.exception("Failed to render %s", path)
        result.failures.append(ArtifactFailure(path=path, message=str(e) or type(e).__name__))


def generate_project(
    classes: Iterable[ClassDefinition],
    relations: Iterable[RelationDefinition],
    options: Optional[GeneratorOptions] = None,
) -> GenerationResult:
    """
    Generate a Spring Boot project from a class diagram.

    Args:
        classes: Class definitions from the diagram
        relations: Relation definitions, already resolved to relation types
        options: Package/project settings; defaults to com.example

    Returns:
        GenerationResult mapping relative paths to file contents, plus any
        per-artifact failures and planner warnings

    Raises:
        EmptyDiagramError: if no classes are supplied
    """
    classes = list(classes)
    relations = list(relations)
    if not classes:
        raise EmptyDiagramError(EMPTY_DIAGRAM_MESSAGE)

    options = normalize_options(options)
    planner = RelationshipPlanner(classes, relations)
    planned = planner.plan()

    result = GenerationResult(warnings=list(planner.warnings))
    package_name = options.package_name
    root = options.java_root

    # Scaffolding
    _emit(result, "pom.xml", render_pom_xml, options)
    _emit(result, "src/main/resources/application.properties", render_application_properties, options)
    _emit(result, f"{root}/Application.java", render_application_java, options)
    _emit(result, f"{root}/config/ModelMapperConfig.java", render_model_mapper_config, options)
    _emit(result, f"{root}/exception/ResourceNotFoundException.java", render_not_found_exception, options)

    # Entity-specific files
    for planned_class in planned.values():
        for package, pattern, render in ENTITY_ARTIFACTS:
            path = artifact_path(options, package, pattern.format(name=planned_class.name))
            _emit(result, path, render, planned_class, package_name)

    _emit(result, "README.md", render_readme, options, list(planned.keys()))
    _emit(result, "postman-collection.json", render_postman_collection, list(planned.values()), options)
    _emit(result, "postman-environment.json", render_postman_environment, options)

    log.info(
        "Generated %d files for %d classes and %d relations (%d failed, %d warnings)",
        len(result.files), len(planned), len(relations), len(result.failures), len(result.warnings),
    )
    return result
