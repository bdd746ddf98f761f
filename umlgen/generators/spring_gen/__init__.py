"""Class diagram to Spring Boot project generator."""
from umlgen.generators.spring_gen.generator import (
    EmptyDiagramError,
    GeneratorError,
    generate_project,
)
from umlgen.generators.spring_gen.planner import RelationshipPlanner
from umlgen.generators.spring_gen.types import (
    ClassDefinition,
    GenerationResult,
    GeneratorOptions,
    RelationDefinition,
    RelationType,
)
from umlgen.generators.spring_gen.writer import build_archive, write_archive, write_files

__all__ = [
    "ClassDefinition",
    "EmptyDiagramError",
    "GenerationResult",
    "GeneratorError",
    "GeneratorOptions",
    "RelationDefinition",
    "RelationType",
    "RelationshipPlanner",
    "build_archive",
    "generate_project",
    "write_archive",
    "write_files",
]
