"""Map free-text attribute types typed in the diagram to canonical Java types."""
import re
from types import MappingProxyType
from typing import Optional, Set

from umlgen.generators.spring_gen.types import CanonicalType


TYPE_SYNONYMS = MappingProxyType({
    "int": CanonicalType.INTEGER,
    "Int": CanonicalType.INTEGER,
    "integer": CanonicalType.INTEGER,
    "Integer": CanonicalType.INTEGER,
    "long": CanonicalType.LONG,
    "Long": CanonicalType.LONG,
    "string": CanonicalType.TEXT,
    "String": CanonicalType.TEXT,
    "text": CanonicalType.TEXT,
    "Text": CanonicalType.TEXT,
    "double": CanonicalType.DOUBLE,
    "Double": CanonicalType.DOUBLE,
    "float": CanonicalType.FLOAT,
    "Float": CanonicalType.FLOAT,
    "decimal": CanonicalType.DECIMAL,
    "Decimal": CanonicalType.DECIMAL,
    "BigDecimal": CanonicalType.DECIMAL,
    "money": CanonicalType.DECIMAL,
    "currency": CanonicalType.DECIMAL,
    "bool": CanonicalType.BOOLEAN,
    "Bool": CanonicalType.BOOLEAN,
    "boolean": CanonicalType.BOOLEAN,
    "Boolean": CanonicalType.BOOLEAN,
    "date": CanonicalType.DATE,
    "Date": CanonicalType.DATE,
    "LocalDate": CanonicalType.DATE,
    "datetime": CanonicalType.DATE_TIME,
    "DateTime": CanonicalType.DATE_TIME,
    "LocalDateTime": CanonicalType.DATE_TIME,
    "timestamp": CanonicalType.DATE_TIME,
    "uuid": CanonicalType.UUID,
    "UUID": CanonicalType.UUID,
    "guid": CanonicalType.UUID,
})

# Lower-cased view used when the exact spelling is not listed ("INT", "TimeStamp", ...)
_CASE_INSENSITIVE_SYNONYMS = MappingProxyType(
    {key.lower(): value for key, value in TYPE_SYNONYMS.items()}
)

JAVA_PRIMITIVES = frozenset({
    "int", "long", "double", "float", "boolean", "byte", "short", "char", "void",
})

TYPE_IMPORTS = MappingProxyType({
    CanonicalType.DECIMAL: "import java.math.BigDecimal;",
    CanonicalType.DATE: "import java.time.LocalDate;",
    CanonicalType.DATE_TIME: "import java.time.LocalDateTime;",
    CanonicalType.UUID: "import java.util.UUID;",
})

_CAPITALIZED_IDENTIFIER = re.compile(r"^[A-Z]\w*$")


def resolve_type(token: Optional[str]) -> CanonicalType:
    """Resolve a type token; unknown tokens default to the text type."""
    normalized = (token or "").strip()
    if normalized in TYPE_SYNONYMS:
        return TYPE_SYNONYMS[normalized]
    return _CASE_INSENSITIVE_SYNONYMS.get(normalized.lower(), CanonicalType.TEXT)


def is_type_like(token: str) -> bool:
    """True for Java primitives, known canonical names and capitalized identifiers."""
    t = token.strip()
    if t in JAVA_PRIMITIVES:
        return True
    if t in {c.value for c in CanonicalType}:
        return True
    return bool(_CAPITALIZED_IDENTIFIER.match(t))


def import_for(java_type: CanonicalType) -> Optional[str]:
    return TYPE_IMPORTS.get(java_type)


def collect_imports(java_types) -> Set[str]:
    """Import lines needed for the given canonical types."""
    imports = set()
    for java_type in java_types:
        line = import_for(java_type)
        if line:
            imports.add(line)
    return imports
