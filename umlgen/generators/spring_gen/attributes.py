"""Parse free-text attribute lines from class boxes."""
import re
from typing import NamedTuple

from umlgen.generators.spring_gen.naming import sanitize, to_camel
from umlgen.generators.spring_gen.type_resolver import is_type_like, resolve_type
from umlgen.generators.spring_gen.types import CanonicalType


class ParsedAttribute(NamedTuple):
    name: str
    type: CanonicalType


def parse_attribute(line, index: int) -> ParsedAttribute:
    """Parse one attribute line.

    Accepted forms, tried in order:
        "name: Type"
        "Type name"   (first token must look like a type)
        "name"        (anything else; typed as String)

    Blank lines become ``field_<index + 1>``. Never raises.
    """
    fallback = f"field_{index + 1}"
    raw = str(line if line is not None else "").strip()
    if not raw:
        return ParsedAttribute(fallback, CanonicalType.TEXT)

    # 1) "name: Type"
    if ":" in raw:
        left, right = raw.split(":", 1)
        name = to_camel(sanitize(left.strip(), fallback))
        return ParsedAttribute(name, resolve_type(right))

    # 2) "Type name"
    parts = [p for p in re.split(r"\s+", raw) if p]
    if len(parts) == 2 and is_type_like(parts[0]):
        name = to_camel(sanitize(parts[1], fallback))
        return ParsedAttribute(name, resolve_type(parts[0]))

    # 3) "name"
    return ParsedAttribute(to_camel(sanitize(raw, fallback)), CanonicalType.TEXT)
