"""Generate a Spring Boot project from a class diagram JSON file.

Usage:
    python scripts/generate_project.py --diagram diagram.json --out ./out
    python scripts/generate_project.py --diagram diagram.json --out ./out --zip
"""
import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from umlgen.core.logging import configure_logging
from umlgen.generators.spring_gen import generate_project, write_archive, write_files
from umlgen.generators.spring_gen.generator import EMPTY_DIAGRAM_MESSAGE, normalize_options
from umlgen.schemas.diagram import DiagramRequest

log = logging.getLogger("generate_project")

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_BAD_INPUT = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--diagram", required=True, type=Path, help="Diagram JSON file (classes + relations)")
    parser.add_argument("--out", required=True, type=Path, help="Output directory")
    parser.add_argument("--zip", action="store_true", help="Write <project>.zip instead of a file tree")
    parser.add_argument("--package-name", help="Java base package (overrides the diagram)")
    parser.add_argument("--project-name", help="Maven artifact id (overrides the diagram)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        diagram = DiagramRequest.model_validate_json(args.diagram.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        print(f"Cannot read diagram {args.diagram}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if not diagram.classes:
        print(EMPTY_DIAGRAM_MESSAGE, file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.package_name:
        diagram.package_name = args.package_name
    if args.project_name:
        diagram.project_name = args.project_name

    classes, relations = diagram.to_definitions()
    options = normalize_options(diagram.generator_options())
    result = generate_project(classes, relations, options)

    if args.zip:
        target = write_archive(result.files, args.out / f"{options.project_name}.zip")
    else:
        write_files(result.files, args.out)
        target = args.out

    print("=" * 60)
    print(f"Project: {options.project_name} ({options.package_name})")
    print(f"Classes: {len(classes)}, relations: {len(relations)}")
    print(f"Files written: {len(result.files)} -> {target}")
    for warning in result.warnings:
        print(f"  warning: {warning}")
    print("=" * 60)

    if not result.ok:
        print(result.failure_summary(), file=sys.stderr)
        return EXIT_PARTIAL
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
