"""Dataclasses and enums for Spring Boot project generation."""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple, Union


class RelationType(str, Enum):
    ONE_TO_ONE = "ONE_TO_ONE"
    ONE_TO_MANY = "ONE_TO_MANY"
    MANY_TO_ONE = "MANY_TO_ONE"
    MANY_TO_MANY = "MANY_TO_MANY"


# Diagram edge kinds -> persistence relation type. "nav" and unknown kinds fall back to MANY_TO_ONE.
RELATION_KIND_TYPES = MappingProxyType({
    "comp": RelationType.ONE_TO_ONE,
    "composition": RelationType.ONE_TO_ONE,
    "aggr": RelationType.ONE_TO_MANY,
    "aggregation": RelationType.ONE_TO_MANY,
    "assoc": RelationType.MANY_TO_MANY,
    "association": RelationType.MANY_TO_MANY,
    "dep": RelationType.MANY_TO_ONE,
    "dependency": RelationType.MANY_TO_ONE,
    "inherit": RelationType.ONE_TO_ONE,
    "inheritance": RelationType.ONE_TO_ONE,
    "generalization": RelationType.ONE_TO_ONE,
    "nav": RelationType.MANY_TO_ONE,
})


def relation_type_for_kind(kind: Optional[str]) -> RelationType:
    """Resolve a diagram edge kind (assoc, aggr, comp, dep, inherit, ...) to a relation type."""
    key = (kind or "").strip().lower()
    return RELATION_KIND_TYPES.get(key, RelationType.MANY_TO_ONE)


class CanonicalType(str, Enum):
    """Target platform scalar types. Values are the Java type names emitted."""
    TEXT = "String"
    INTEGER = "Integer"
    LONG = "Long"
    DOUBLE = "Double"
    FLOAT = "Float"
    DECIMAL = "BigDecimal"
    BOOLEAN = "Boolean"
    DATE = "LocalDate"
    DATE_TIME = "LocalDateTime"
    UUID = "UUID"


class Multiplicity(str, Enum):
    ONE = "one"
    MANY = "many"


class Ownership(str, Enum):
    OWNING = "owning"
    INVERSE = "inverse"


@dataclass(frozen=True)
class ClassDefinition:
    """One class box from the diagram."""
    name: str
    attributes: Tuple[str, ...] = ()
    methods: Tuple[str, ...] = ()  # carried through, never emitted


@dataclass(frozen=True)
class RelationDefinition:
    """One edge from the diagram, already resolved to a relation type."""
    source: str
    target: str
    type: RelationType
    bidirectional: bool = False


@dataclass(frozen=True)
class ScalarField:
    name: str
    type: CanonicalType


@dataclass(frozen=True)
class ReferenceField:
    name: str
    other_class: str
    multiplicity: Multiplicity
    ownership: Ownership
    relation_type: RelationType
    mapped_by: Optional[str] = None
    join_column: Optional[str] = None
    join_table: Optional[str] = None
    inverse_join_column: Optional[str] = None

    @property
    def is_collection(self) -> bool:
        return self.multiplicity == Multiplicity.MANY


ResolvedField = Union[ScalarField, ReferenceField]


@dataclass(frozen=True)
class SkippedField:
    """A field candidate dropped because its name was already taken on the class."""
    name: str
    reason: str


@dataclass
class PlannedClass:
    """Planner output for one class: ordered field reservations plus diagnostics."""
    name: str  # PascalCase entity name
    var_name: str  # camelCase variable name
    definition: ClassDefinition
    fields: Dict[str, ResolvedField] = field(default_factory=dict)
    skipped: List[SkippedField] = field(default_factory=list)

    @property
    def scalar_fields(self) -> List[ScalarField]:
        return [f for f in self.fields.values() if isinstance(f, ScalarField)]

    @property
    def reference_fields(self) -> List[ReferenceField]:
        return [f for f in self.fields.values() if isinstance(f, ReferenceField)]


@dataclass(frozen=True)
class GeneratorOptions:
    """Per-run options for the generated Spring Boot project."""
    package_name: str = "com.example"
    project_name: str = "spring-boot-project"
    java_version: str = "17"
    spring_boot_version: str = "3.2.0"
    base_url: str = "http://localhost:8080"

    @property
    def package_path(self) -> str:
        return self.package_name.replace(".", "/")

    @property
    def java_root(self) -> str:
        return f"src/main/java/{self.package_path}"


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from project root
    content: str  # File contents


@dataclass(frozen=True)
class ArtifactFailure:
    """An artifact that could not be rendered."""
    path: str
    message: str


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    files: Dict[str, str] = field(default_factory=dict)
    failures: List[ArtifactFailure] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def generated_files(self) -> List[GeneratedFile]:
        return [GeneratedFile(path=path, content=content) for path, content in self.files.items()]

    def failure_summary(self) -> Optional[str]:
        """Single aggregate message for all failed artifacts, or None when nothing failed."""
        if not self.failures:
            return None
        details = "; ".join(f"{f.path}: {f.message}" for f in self.failures)
        return f"Failed to generate {len(self.failures)} artifact(s): {details}"
