"""Entity-specific rendering functions for Spring Boot generation."""
from typing import List

from umlgen.generators.spring_gen.naming import resource_path, table_name
from umlgen.generators.spring_gen.type_resolver import collect_imports
from umlgen.generators.spring_gen.types import (
    Multiplicity,
    Ownership,
    PlannedClass,
    ReferenceField,
    RelationType,
)

INDENT = "    "
JSON_IGNORE_LAZY = '@JsonIgnoreProperties({"hibernateLazyInitializer", "handler"})'


def _relation_annotations(ref: ReferenceField) -> List[str]:
    """JPA annotations for one reference field."""
    if ref.multiplicity == Multiplicity.ONE:
        if ref.ownership == Ownership.INVERSE:
            return [f'@OneToOne(mappedBy = "{ref.mapped_by}", fetch = FetchType.LAZY)']
        if ref.relation_type == RelationType.ONE_TO_ONE:
            return [
                "@OneToOne(cascade = CascadeType.ALL, fetch = FetchType.LAZY)",
                f'@JoinColumn(name = "{ref.join_column}")',
            ]
        return [
            "@ManyToOne(fetch = FetchType.LAZY)",
            f'@JoinColumn(name = "{ref.join_column}")',
        ]

    if ref.relation_type == RelationType.MANY_TO_MANY:
        if ref.ownership == Ownership.OWNING:
            return [
                "@ManyToMany(fetch = FetchType.LAZY)",
                "@JoinTable(",
                f'{INDENT}name = "{ref.join_table}",',
                f'{INDENT}joinColumns = @JoinColumn(name = "{ref.join_column}"),',
                f'{INDENT}inverseJoinColumns = @JoinColumn(name = "{ref.inverse_join_column}")',
                ")",
            ]
        return [f'@ManyToMany(mappedBy = "{ref.mapped_by}", fetch = FetchType.LAZY)']

    # MANY_TO_ONE inverse side and ONE_TO_MANY source side
    return [f'@OneToMany(mappedBy = "{ref.mapped_by}", cascade = CascadeType.ALL, fetch = FetchType.LAZY)']


def _reference_lines(ref: ReferenceField) -> List[str]:
    lines = [INDENT + a for a in _relation_annotations(ref)]
    lines.append(INDENT + JSON_IGNORE_LAZY)
    if ref.is_collection:
        lines.append(f"{INDENT}@Builder.Default")
        lines.append(f"{INDENT}private Set<{ref.other_class}> {ref.name} = new HashSet<>();")
    else:
        lines.append(f"{INDENT}private {ref.other_class} {ref.name};")
    return lines


def _import_block(base: List[str], extra) -> List[str]:
    lines = list(base)
    extras = sorted(extra)
    if extras:
        lines.append("")
        lines.extend(extras)
    return lines


def render_entity(planned: PlannedClass, package_name: str) -> str:
    """Generate the JPA entity for a class: surrogate id, scalar columns and relations."""
    class_name = planned.name
    var_name = planned.var_name
    scalars = planned.scalar_fields

    lines = [f"package {package_name}.model;", ""]
    lines.extend(_import_block(
        [
            "import com.fasterxml.jackson.annotation.JsonIgnoreProperties;",
            "import jakarta.persistence.*;",
            "import lombok.*;",
            "",
            "import java.util.HashSet;",
            "import java.util.Objects;",
            "import java.util.Set;",
        ],
        collect_imports(f.type for f in scalars),
    ))
    lines.extend([
        "",
        "@Entity",
        f'@Table(name = "{table_name(class_name)}")',
        "@Data",
        "@NoArgsConstructor",
        "@AllArgsConstructor",
        "@Builder",
        f"public class {class_name} {{",
        "",
        f"{INDENT}@Id",
        f"{INDENT}@GeneratedValue(strategy = GenerationType.IDENTITY)",
        f"{INDENT}private Long id;",
    ])

    for resolved in planned.fields.values():
        lines.append("")
        if isinstance(resolved, ReferenceField):
            lines.extend(_reference_lines(resolved))
        else:
            lines.append(f'{INDENT}@Column(name = "{resolved.name.lower()}")')
            lines.append(f"{INDENT}private {resolved.type.value} {resolved.name};")

    # equality on id only; toString stays off the relation graph
    lines.extend([
        "",
        f"{INDENT}@Override",
        f"{INDENT}public boolean equals(Object o) {{",
        f"{INDENT * 2}if (this == o) return true;",
        f"{INDENT * 2}if (o == null || getClass() != o.getClass()) return false;",
        f"{INDENT * 2}{class_name} other = ({class_name}) o;",
        f"{INDENT * 2}return Objects.equals(id, other.id);",
        f"{INDENT}}}",
        "",
        f"{INDENT}@Override",
        f"{INDENT}public int hashCode() {{",
        f"{INDENT * 2}return Objects.hash(id);",
        f"{INDENT}}}",
        "",
        f"{INDENT}@Override",
        f"{INDENT}public String toString() {{",
        f'{INDENT * 2}return "{class_name}{{id=" + id + "}}";',
        f"{INDENT}}}",
        "}",
        "",
    ])
    return "\n".join(lines)


def render_dto(planned: PlannedClass, package_name: str) -> str:
    """Generate the DTO: id plus scalar attributes only, so no relation cycles are serialized."""
    scalars = planned.scalar_fields
    lines = [f"package {package_name}.dto;", ""]
    lines.extend(_import_block(["import lombok.*;"], collect_imports(f.type for f in scalars)))
    lines.extend([
        "",
        "@Data",
        "@NoArgsConstructor",
        "@AllArgsConstructor",
        f"public class {planned.name}DTO {{",
        f"{INDENT}private Long id;",
    ])
    if scalars:
        lines.append("")
        for f in scalars:
            lines.append(f"{INDENT}private {f.type.value} {f.name};")
    lines.extend(["}", ""])
    return "\n".join(lines)


def render_repository(planned: PlannedClass, package_name: str) -> str:
    class_name = planned.name
    return "\n".join([
        f"package {package_name}.repository;",
        "",
        f"import {package_name}.model.{class_name};",
        "import org.springframework.data.jpa.repository.JpaRepository;",
        "import org.springframework.stereotype.Repository;",
        "",
        "@Repository",
        f"public interface {class_name}Repository extends JpaRepository<{class_name}, Long> {{",
        "}",
        "",
    ])


def render_service(planned: PlannedClass, package_name: str) -> str:
    """Generate the transactional service; missing ids raise ResourceNotFoundException."""
    class_name = planned.name
    dto = f"{class_name}DTO"
    repo = f"{class_name}Repository"
    repo_var = f"{planned.var_name}Repository"
    not_found = f'new ResourceNotFoundException("{class_name} not found with id: " + id)'

    lines = [
        f"package {package_name}.service;",
        "",
        f"import {package_name}.dto.{dto};",
        f"import {package_name}.exception.ResourceNotFoundException;",
        f"import {package_name}.model.{class_name};",
        f"import {package_name}.repository.{repo};",
        "import org.modelmapper.ModelMapper;",
        "import org.springframework.stereotype.Service;",
        "import org.springframework.transaction.annotation.Transactional;",
        "",
        "import java.util.List;",
        "import java.util.stream.Collectors;",
        "",
        "@Service",
        "@Transactional",
        f"public class {class_name}Service {{",
        "",
        f"{INDENT}private final {repo} {repo_var};",
        f"{INDENT}private final ModelMapper modelMapper;",
        "",
        f"{INDENT}public {class_name}Service({repo} {repo_var}, ModelMapper modelMapper) {{",
        f"{INDENT * 2}this.{repo_var} = {repo_var};",
        f"{INDENT * 2}this.modelMapper = modelMapper;",
        f"{INDENT}}}",
        "",
        f"{INDENT}@Transactional(readOnly = true)",
        f"{INDENT}public List<{dto}> findAll() {{",
        f"{INDENT * 2}return {repo_var}.findAll().stream()",
        f"{INDENT * 4}.map(entity -> modelMapper.map(entity, {dto}.class))",
        f"{INDENT * 4}.collect(Collectors.toList());",
        f"{INDENT}}}",
        "",
        f"{INDENT}@Transactional(readOnly = true)",
        f"{INDENT}public {dto} findById(Long id) {{",
        f"{INDENT * 2}{class_name} entity = {repo_var}.findById(id)",
        f"{INDENT * 4}.orElseThrow(() -> {not_found});",
        f"{INDENT * 2}return modelMapper.map(entity, {dto}.class);",
        f"{INDENT}}}",
        "",
        f"{INDENT}public {dto} create({dto} dto) {{",
        f"{INDENT * 2}{class_name} entity = modelMapper.map(dto, {class_name}.class);",
        f"{INDENT * 2}entity.setId(null);",
        f"{INDENT * 2}{class_name} saved = {repo_var}.save(entity);",
        f"{INDENT * 2}return modelMapper.map(saved, {dto}.class);",
        f"{INDENT}}}",
        "",
        f"{INDENT}public {dto} update(Long id, {dto} dto) {{",
        f"{INDENT * 2}{class_name} existing = {repo_var}.findById(id)",
        f"{INDENT * 4}.orElseThrow(() -> {not_found});",
        f"{INDENT * 2}Long originalId = existing.getId();",
        f"{INDENT * 2}modelMapper.map(dto, existing);",
        f"{INDENT * 2}existing.setId(originalId);",
        f"{INDENT * 2}{class_name} saved = {repo_var}.save(existing);",
        f"{INDENT * 2}return modelMapper.map(saved, {dto}.class);",
        f"{INDENT}}}",
        "",
        f"{INDENT}public void delete(Long id) {{",
        f"{INDENT * 2}if (!{repo_var}.existsById(id)) {{",
        f"{INDENT * 3}throw {not_found};",
        f"{INDENT * 2}}}",
        f"{INDENT * 2}{repo_var}.deleteById(id);",
        f"{INDENT}}}",
        "}",
        "",
    ]
    return "\n".join(lines)


def render_controller(planned: PlannedClass, package_name: str) -> str:
    """Generate the REST controller at /api/<plural>; not-found becomes an empty 404."""
    class_name = planned.name
    dto = f"{class_name}DTO"
    service_var = f"{planned.var_name}Service"

    lines = [
        f"package {package_name}.controller;",
        "",
        f"import {package_name}.dto.{dto};",
        f"import {package_name}.exception.ResourceNotFoundException;",
        f"import {package_name}.service.{class_name}Service;",
        "import org.springframework.http.ResponseEntity;",
        "import org.springframework.web.bind.annotation.*;",
        "",
        "import java.util.List;",
        "",
        "@RestController",
        f'@RequestMapping("/api/{resource_path(class_name)}")',
        f"public class {class_name}Controller {{",
        "",
        f"{INDENT}private final {class_name}Service {service_var};",
        "",
        f"{INDENT}public {class_name}Controller({class_name}Service {service_var}) {{",
        f"{INDENT * 2}this.{service_var} = {service_var};",
        f"{INDENT}}}",
        "",
        f"{INDENT}@GetMapping",
        f"{INDENT}public ResponseEntity<List<{dto}>> getAll() {{",
        f"{INDENT * 2}return ResponseEntity.ok({service_var}.findAll());",
        f"{INDENT}}}",
        "",
        f'{INDENT}@GetMapping("/{{id}}")',
        f"{INDENT}public ResponseEntity<{dto}> getById(@PathVariable Long id) {{",
        f"{INDENT * 2}try {{",
        f"{INDENT * 3}return ResponseEntity.ok({service_var}.findById(id));",
        f"{INDENT * 2}}} catch (ResourceNotFoundException e) {{",
        f"{INDENT * 3}return ResponseEntity.notFound().build();",
        f"{INDENT * 2}}}",
        f"{INDENT}}}",
        "",
        f"{INDENT}@PostMapping",
        f"{INDENT}public ResponseEntity<{dto}> create(@RequestBody {dto} dto) {{",
        f"{INDENT * 2}return ResponseEntity.ok({service_var}.create(dto));",
        f"{INDENT}}}",
        "",
        f'{INDENT}@PutMapping("/{{id}}")',
        f"{INDENT}public ResponseEntity<{dto}> update(@PathVariable Long id, @RequestBody {dto} dto) {{",
        f"{INDENT * 2}try {{",
        f"{INDENT * 3}return ResponseEntity.ok({service_var}.update(id, dto));",
        f"{INDENT * 2}}} catch (ResourceNotFoundException e) {{",
        f"{INDENT * 3}return ResponseEntity.notFound().build();",
        f"{INDENT * 2}}}",
        f"{INDENT}}}",
        "",
        f'{INDENT}@DeleteMapping("/{{id}}")',
        f"{INDENT}public ResponseEntity<Void> delete(@PathVariable Long id) {{",
        f"{INDENT * 2}try {{",
        f"{INDENT * 3}{service_var}.delete(id);",
        f"{INDENT * 3}return ResponseEntity.noContent().build();",
        f"{INDENT * 2}}} catch (ResourceNotFoundException e) {{",
        f"{INDENT * 3}return ResponseEntity.notFound().build();",
        f"{INDENT * 2}}}",
        f"{INDENT}}}",
        "}",
        "",
    ]
    return "\n".join(lines)
