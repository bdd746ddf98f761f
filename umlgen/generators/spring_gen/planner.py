"""Relationship planning: decide which fields every generated entity carries.

Each class first reserves the surrogate ``id`` and then its attribute names, in
declaration order. Every relation touching the class is then visited in input
order and may contribute one reference field. A candidate whose name is already
reserved is dropped; earlier reservations are never evicted.

Field shape per relation type (C is the class being planned):

    ONE_TO_ONE    source              -> scalar, owning (join column on C)
                  target, bidir       -> scalar, inverse (mappedBy)
    MANY_TO_ONE   source              -> scalar, owning
                  target, bidir       -> collection, inverse
    ONE_TO_MANY   source              -> collection, owning (key lives on other)
                  target              -> scalar, owning; emitted even when not bidirectional
    MANY_TO_MANY  source              -> collection, owning (defines join table)
                  target, bidir       -> collection, inverse

One-directional targets of the other types contribute nothing.

Once every class is planned, a field carrying ``mappedBy`` is dropped unless the
named field on the other class survived as an owning reference back to it.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from umlgen.generators.spring_gen.attributes import parse_attribute
from umlgen.generators.spring_gen.naming import class_identifier, pluralize, to_camel
from umlgen.generators.spring_gen.types import (
    ClassDefinition,
    Multiplicity,
    Ownership,
    PlannedClass,
    ReferenceField,
    RelationDefinition,
    RelationType,
    ScalarField,
    SkippedField,
)

log = logging.getLogger(__name__)

ID_FIELD = "id"


def join_table_name(source: str, target: str) -> str:
    """Join table for a many-to-many relation, named after the relation's own endpoints."""
    return f"{source.lower()}_{target.lower()}"


class RelationshipPlanner:
    """Resolves the ordered field list of every class for one generation run.

    The planner holds reservation state, so build a new one per run.
    """

    def __init__(self, classes: Iterable[ClassDefinition], relations: Iterable[RelationDefinition]):
        self.classes = list(classes)
        self.relations = list(relations)
        self.warnings: List[str] = []
        self._planned: Optional[Dict[str, PlannedClass]] = None

    def plan(self) -> Dict[str, PlannedClass]:
        """Plan all classes. Returns planned classes keyed by entity name, in input order."""
        if self._planned is not None:
            return self._planned

        planned = self._register_classes()
        relations = self._matched_relations(planned)

        for planned_class in planned.values():
            self._reserve_attributes(planned_class)
            for relation, source, target in relations:
                # self-relations are visited as source first, then as target
                if source == planned_class.name:
                    self._plan_endpoint(planned_class, relation, source, target, is_source=True)
                if target == planned_class.name:
                    self._plan_endpoint(planned_class, relation, source, target, is_source=False)

        self._drop_unpaired_mapped_by(planned)
        self._planned = planned
        return planned

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        log.warning(message)

    def _register_classes(self) -> Dict[str, PlannedClass]:
        planned: Dict[str, PlannedClass] = {}
        for cls in self.classes:
            name = class_identifier(cls.name)
            if name in planned:
                self._warn(
                    f"Class '{cls.name}' resolves to '{name}', which is already defined; "
                    "keeping the first definition"
                )
                continue
            planned[name] = PlannedClass(name=name, var_name=to_camel(name), definition=cls)
        return planned

    def _matched_relations(
        self, planned: Dict[str, PlannedClass]
    ) -> List[Tuple[RelationDefinition, str, str]]:
        matched = []
        for relation in self.relations:
            source = class_identifier(relation.source)
            target = class_identifier(relation.target)
            missing = [raw for raw, name in ((relation.source, source), (relation.target, target))
                       if name not in planned]
            if missing:
                self._warn(
                    f"Relation {relation.source} -> {relation.target} references unknown "
                    f"class(es) {', '.join(repr(m) for m in missing)}; ignored"
                )
                continue
            matched.append((relation, source, target))
        return matched

    @staticmethod
    def _is_reserved(planned_class: PlannedClass, name: str) -> bool:
        return name == ID_FIELD or name in planned_class.fields

    def _skip(self, planned_class: PlannedClass, name: str, reason: str) -> None:
        planned_class.skipped.append(SkippedField(name=name, reason=reason))
        log.debug("Dropped field %s.%s: %s", planned_class.name, name, reason)

    @staticmethod
    def _has_partner(planned: Dict[str, PlannedClass], owner: str, ref: ReferenceField) -> bool:
        """True when ``ref.mapped_by`` names an owning reference on the other class pointing back at ``owner``."""
        partner = planned[ref.other_class].fields.get(ref.mapped_by)
        return (
            isinstance(partner, ReferenceField)
            and partner.other_class == owner
            and partner.mapped_by is None
            and partner.is_collection == (ref.relation_type == RelationType.MANY_TO_MANY)
        )

    def _drop_unpaired_mapped_by(self, planned: Dict[str, PlannedClass]) -> None:
        # runs after every class is planned; a mappedBy whose partner was dropped cannot be mapped
        for planned_class in planned.values():
            for ref in list(planned_class.reference_fields):
                if ref.mapped_by is None or self._has_partner(planned, planned_class.name, ref):
                    continue
                del planned_class.fields[ref.name]
                self._skip(
                    planned_class,
                    ref.name,
                    f"mappedBy {ref.other_class}.{ref.mapped_by} is not a reference back to {planned_class.name}",
                )

    def _reserve_attributes(self, planned_class: PlannedClass) -> None:
        for index, line in enumerate(planned_class.definition.attributes):
            parsed = parse_attribute(line, index)
            if parsed.name.lower() == ID_FIELD:
                self._skip(planned_class, parsed.name, "surrogate id is generated")
                continue
            if self._is_reserved(planned_class, parsed.name):
                self._skip(planned_class, parsed.name, "duplicate attribute")
                continue
            planned_class.fields[parsed.name] = ScalarField(name=parsed.name, type=parsed.type)

    def _plan_endpoint(
        self,
        planned_class: PlannedClass,
        relation: RelationDefinition,
        source: str,
        target: str,
        is_source: bool,
    ) -> None:
        other = target if is_source else source
        ref = self._reference_for(relation, planned_class.name, other, source, target, is_source)
        if ref is None:
            return
        if self._is_reserved(planned_class, ref.name):
            self._skip(
                planned_class,
                ref.name,
                f"name already taken; {relation.type.value} {source} -> {target} not mapped here",
            )
            return
        planned_class.fields[ref.name] = ref

    @staticmethod
    def _reference_for(
        relation: RelationDefinition,
        this: str,
        other: str,
        source: str,
        target: str,
        is_source: bool,
    ) -> Optional[ReferenceField]:
        this_var = to_camel(this)
        other_var = to_camel(other)
        other_plural = pluralize(other_var)
        rtype = relation.type

        if rtype == RelationType.ONE_TO_ONE:
            if is_source:
                return ReferenceField(other_var, other, Multiplicity.ONE, Ownership.OWNING, rtype,
                                      join_column=f"{other_var}_id")
            if relation.bidirectional:
                return ReferenceField(other_var, other, Multiplicity.ONE, Ownership.INVERSE, rtype,
                                      mapped_by=this_var)
            return None

        if rtype == RelationType.MANY_TO_ONE:
            if is_source:
                return ReferenceField(other_var, other, Multiplicity.ONE, Ownership.OWNING, rtype,
                                      join_column=f"{other_var}_id")
            if relation.bidirectional:
                return ReferenceField(other_plural, other, Multiplicity.MANY, Ownership.INVERSE, rtype,
                                      mapped_by=this_var)
            return None

        if rtype == RelationType.ONE_TO_MANY:
            if is_source:
                return ReferenceField(other_plural, other, Multiplicity.MANY, Ownership.OWNING, rtype,
                                      mapped_by=this_var)
            # back-reference always emitted: the "many" side holds the foreign key
            return ReferenceField(other_var, other, Multiplicity.ONE, Ownership.OWNING, rtype,
                                  join_column=f"{other_var}_id")

        join_table = join_table_name(source, target)
        if is_source:
            join_column = f"{this_var}_id"
            inverse_join_column = f"{other_var}_id"
            if inverse_join_column == join_column:
                inverse_join_column = f"related_{inverse_join_column}"
            return ReferenceField(other_plural, other, Multiplicity.MANY, Ownership.OWNING, rtype,
                                  join_table=join_table, join_column=join_column,
                                  inverse_join_column=inverse_join_column)
        if relation.bidirectional:
            return ReferenceField(other_plural, other, Multiplicity.MANY, Ownership.INVERSE, rtype,
                                  mapped_by=pluralize(this_var), join_table=join_table)
        return None


def plan_classes(
    classes: Iterable[ClassDefinition], relations: Iterable[RelationDefinition]
) -> Dict[str, PlannedClass]:
    """Convenience wrapper: plan with a fresh planner."""
    return RelationshipPlanner(classes, relations).plan()
