"""Tests for whole-project generation."""
import json

import pytest

from umlgen.generators.spring_gen import generator
from umlgen.generators.spring_gen import EmptyDiagramError, GeneratorOptions, generate_project
from umlgen.generators.spring_gen.planner import plan_classes
from umlgen.generators.spring_gen.sample_payload import (
    build_postman_environment,
    build_sample_body,
)
from umlgen.generators.spring_gen.types import ClassDefinition, RelationDefinition, RelationType

ROOT = "src/main/java/com/example"


def _author_book():
    classes = [
        ClassDefinition("Author", attributes=("name: String",)),
        ClassDefinition("Book", attributes=("title: String",)),
    ]
    relations = [RelationDefinition("Author", "Book", RelationType.ONE_TO_MANY, bidirectional=False)]
    return classes, relations


def test_empty_diagram_raises():
    with pytest.raises(EmptyDiagramError):
        generate_project([], [])


def test_author_book_end_to_end():
    """Author/Book 1:N yields both entities, five artifacts per class and scalar-only DTOs."""
    classes, relations = _author_book()
    result = generate_project(classes, relations)

    assert result.ok, result.failure_summary()
    expected = {
        "pom.xml",
        "README.md",
        "src/main/resources/application.properties",
        f"{ROOT}/Application.java",
        f"{ROOT}/config/ModelMapperConfig.java",
        f"{ROOT}/exception/ResourceNotFoundException.java",
        "postman-collection.json",
        "postman-environment.json",
    }
    for name in ("Author", "Book"):
        expected |= {
            f"{ROOT}/model/{name}.java",
            f"{ROOT}/dto/{name}DTO.java",
            f"{ROOT}/repository/{name}Repository.java",
            f"{ROOT}/service/{name}Service.java",
            f"{ROOT}/controller/{name}Controller.java",
        }
    assert set(result.files) == expected

    author = result.files[f"{ROOT}/model/Author.java"]
    book = result.files[f"{ROOT}/model/Book.java"]
    assert "private Set<Book> books" in author
    assert "private Author author;" in book

    author_dto = result.files[f"{ROOT}/dto/AuthorDTO.java"]
    book_dto = result.files[f"{ROOT}/dto/BookDTO.java"]
    assert "private Long id;" in author_dto and "private String name;" in author_dto
    assert "books" not in author_dto
    assert "private Long id;" in book_dto and "private String title;" in book_dto
    assert "author" not in book_dto


def test_options_drive_paths_and_build_descriptor():
    classes, relations = _author_book()
    options = GeneratorOptions(package_name="Org.Acme.Library", project_name="My Library")
    result = generate_project(classes, relations, options)

    root = "src/main/java/org/acme/library"
    assert f"{root}/model/Author.java" in result.files
    assert result.files[f"{root}/model/Author.java"].startswith("package org.acme.library.model;")
    pom = result.files["pom.xml"]
    assert "<groupId>org.acme.library</groupId>" in pom
    assert "<artifactId>my-library</artifactId>" in pom
    assert "<version>3.2.0</version>" in pom


def test_generation_is_deterministic():
    classes, relations = _author_book()
    assert generate_project(classes, relations).files == generate_project(classes, relations).files


def test_planner_warnings_are_reported():
    classes, _ = _author_book()
    relations = [RelationDefinition("Author", "Publisher", RelationType.MANY_TO_ONE)]
    result = generate_project(classes, relations)
    assert result.ok
    assert any("Publisher" in w for w in result.warnings)


def test_failed_artifact_does_not_stop_generation(monkeypatch):
    """One emitter failure is recorded; every other artifact is still produced."""
    def broken_service(planned, package_name):
        if planned.name == "Book":
            raise ValueError("template exploded")
        return "ok"

    artifacts = tuple(
        (package, pattern, broken_service if package == "service" else render)
        for package, pattern, render in generator.ENTITY_ARTIFACTS
    )
    monkeypatch.setattr(generator, "ENTITY_ARTIFACTS", artifacts)

    classes, relations = _author_book()
    result = generate_project(classes, relations)

    assert not result.ok
    assert [f.path for f in result.failures] == [f"{ROOT}/service/BookService.java"]
    assert f"{ROOT}/service/BookService.java" not in result.files
    assert f"{ROOT}/service/AuthorService.java" in result.files
    assert f"{ROOT}/controller/BookController.java" in result.files
    assert "postman-collection.json" in result.files
    assert result.failure_summary() == (
        f"Failed to generate 1 artifact(s): {ROOT}/service/BookService.java: template exploded"
    )


def test_sample_body_by_type():
    classes = [
        ClassDefinition("Item", attributes=(
            "label", "int count", "total: long", "price: money", "ratio: double",
            "active: bool", "born: date", "seen: timestamp", "ref: uuid",
        )),
        ClassDefinition("Shelf"),
    ]
    relations = [RelationDefinition("Item", "Shelf", RelationType.MANY_TO_ONE)]
    body = build_sample_body(plan_classes(classes, relations)["Item"])

    assert body == {
        "label": "sample_label",
        "count": 1,
        "total": 1,
        "price": 1.0,
        "ratio": 1.0,
        "active": True,
        "born": "2024-01-01",
        "seen": "2024-01-01T00:00:00",
        "ref": "00000000-0000-0000-0000-000000000000",
    }, "reference fields are excluded and each canonical type has a fixed sample"


def test_postman_documents():
    classes, relations = _author_book()
    options = GeneratorOptions(project_name="library-api", base_url="http://localhost:9000")
    result = generate_project(classes, relations, options)

    collection = json.loads(result.files["postman-collection.json"])
    assert collection["info"]["name"] == "library-api API"
    assert [g["name"] for g in collection["item"]] == ["Author CRUD", "Book CRUD"]

    list_request, create_request = collection["item"][1]["item"]
    assert list_request["request"]["method"] == "GET"
    assert list_request["request"]["url"]["raw"] == "{{base_url}}/api/books"
    assert create_request["request"]["method"] == "POST"
    assert json.loads(create_request["request"]["body"]["raw"]) == {"title": "sample_title"}
    assert collection["variable"][0]["value"] == "http://localhost:9000"

    environment = json.loads(result.files["postman-environment.json"])
    assert environment["name"] == "library-api Environment"
    assert environment["values"][0] == {
        "key": "base_url", "value": "http://localhost:9000", "enabled": True, "type": "default",
    }
    assert environment["id"] == build_postman_environment(GeneratorOptions(project_name="library-api"))["id"]


def test_readme_lists_resources():
    classes, relations = _author_book()
    readme = generate_project(classes, relations).files["README.md"]
    assert "- `Author`: `/api/authors`" in readme
    assert "- `Book`: `/api/books`" in readme
