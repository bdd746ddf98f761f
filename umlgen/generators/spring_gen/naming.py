"""Identifier helpers for Java code generation."""
import re
import unicodedata


# camelCase names that collide with these get an "Entity" suffix
JAVA_RESERVED_WORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
})

RESERVED_SUFFIX = "Entity"

# blank class names; must not shadow jakarta.persistence or lombok annotations
UNNAMED_CLASS = "UnnamedClass"


def _is_identifier_char(ch: str) -> bool:
    if ch == "_":
        return True
    category = unicodedata.category(ch)
    return category.startswith("L") or category in ("Nd", "Sc")


def sanitize(raw, fallback: str) -> str:
    """Turn arbitrary text into a Java-safe identifier.

    Every character that is not a letter, decimal digit, underscore or currency
    sign becomes "_". A leading digit gets an "_" prefix. Blank input returns
    ``fallback``.
    """
    text = str(raw if raw is not None else "").strip()
    if not text:
        return fallback
    cleaned = "".join(ch if _is_identifier_char(ch) else "_" for ch in text)
    if unicodedata.category(cleaned[0]) == "Nd":
        cleaned = f"_{cleaned}"
    return cleaned


def to_camel(identifier: str) -> str:
    """Lower-case the first letter; reserved words get an ``Entity`` suffix."""
    text = (identifier or "").strip()
    if not text:
        return "value"
    first = text[0].lower()
    if len(first) != 1:
        first = text[0]
    out = first + text[1:]
    if out in JAVA_RESERVED_WORDS:
        return f"{out}{RESERVED_SUFFIX}"
    return out


def to_pascal(identifier: str) -> str:
    """Upper-case the first letter."""
    text = (identifier or "").strip()
    if not text:
        return "Value"
    first = text[0].upper()
    if len(first) != 1:
        first = text[0]
    return first + text[1:]


def pluralize(identifier: str) -> str:
    """English pluralization heuristics, applied in fixed priority order."""
    text = (identifier or "").strip()
    if not text:
        return "items"
    lower = text.lower()
    if re.search(r"(s|sh|ch|x|z)$", lower):
        return text + "es"
    if re.search(r"[^aeiou]y$", lower):
        return text[:-1] + "ies"
    if lower.endswith("f"):
        return text[:-1] + "ves"
    if lower.endswith("fe"):
        return text[:-2] + "ves"
    return text + "s"


def class_identifier(name) -> str:
    """Canonical entity name for a diagram class name."""
    return to_pascal(sanitize(name, UNNAMED_CLASS))


def table_name(class_name: str) -> str:
    return pluralize(class_name.lower())


def resource_path(class_name: str) -> str:
    """REST collection segment, e.g. ``OrderItem`` -> ``orderItems``."""
    return pluralize(to_camel(class_name))


def sanitize_package_name(package_name: str, fallback: str = "com.example") -> str:
    """Normalise a dotted Java package name; each segment is sanitized and lower-cased."""
    segments = [s for s in (package_name or "").split(".") if s.strip()]
    if not segments:
        return fallback
    cleaned = []
    for segment in segments:
        part = sanitize(segment, "pkg").lower()
        if part in JAVA_RESERVED_WORDS:
            part = f"{part}_"
        cleaned.append(part)
    return ".".join(cleaned)


def sanitize_artifact_id(project_name: str, fallback: str = "spring-boot-project") -> str:
    """Maven artifact id: letters, digits, '.', '_' and '-' only, lower-cased."""
    cleaned = re.sub(r"[^A-Za-z0-9._-]+", "-", (project_name or "").strip()).strip("-.")
    return cleaned.lower() or fallback
