from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from umlgen.generators.spring_gen.types import (
    ClassDefinition,
    GeneratorOptions,
    RelationDefinition,
    RelationType,
    relation_type_for_kind,
)


class ClassIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., examples=["Author"])
    attributes: List[str] = Field(default_factory=list, examples=[["name: String", "int age"]])
    methods: List[str] = Field(default_factory=list)
    is_abstract: bool = Field(False, alias="isAbstract")
    is_interface: bool = Field(False, alias="isInterface")

    def to_definition(self) -> ClassDefinition:
        return ClassDefinition(
            name=self.name,
            attributes=tuple(self.attributes),
            methods=tuple(self.methods),
        )


class RelationIn(BaseModel):
    """A diagram edge. Give either an explicit ``type`` or the edge ``kind`` (assoc, aggr, comp, dep, inherit, nav)."""
    model_config = ConfigDict(populate_by_name=True)

    source: str
    target: str
    type: Optional[RelationType] = None
    kind: Optional[str] = Field(None, examples=["aggr"])
    bidirectional: bool = False
    source_multiplicity: Optional[str] = Field(None, alias="sourceMultiplicity")
    target_multiplicity: Optional[str] = Field(None, alias="targetMultiplicity")
    name: Optional[str] = None
    navigation_property: Optional[str] = Field(None, alias="navigationProperty")

    @model_validator(mode="after")
    def resolve_type(self) -> "RelationIn":
        if self.type is None:
            self.type = relation_type_for_kind(self.kind)
        return self

    def to_definition(self) -> RelationDefinition:
        return RelationDefinition(
            source=self.source,
            target=self.target,
            type=self.type,
            bidirectional=self.bidirectional,
        )


class DiagramRequest(BaseModel):
    classes: List[ClassIn] = Field(default_factory=list)
    relations: List[RelationIn] = Field(default_factory=list)
    package_name: Optional[str] = Field(None, examples=["com.example"])
    project_name: Optional[str] = Field(None, examples=["library-api"])

    def to_definitions(self) -> Tuple[List[ClassDefinition], List[RelationDefinition]]:
        return (
            [c.to_definition() for c in self.classes],
            [r.to_definition() for r in self.relations],
        )

    def generator_options(
        self,
        default_package_name: str = "com.example",
        default_project_name: str = "spring-boot-project",
        **overrides,
    ) -> GeneratorOptions:
        return GeneratorOptions(
            package_name=self.package_name or default_package_name,
            project_name=self.project_name or default_project_name,
            **overrides,
        )


class ArtifactFailureOut(BaseModel):
    path: str
    message: str


class GenerationPreview(BaseModel):
    files: dict[str, str]
    warnings: List[str] = []
    failures: List[ArtifactFailureOut] = []
