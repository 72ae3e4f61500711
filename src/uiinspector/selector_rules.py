from __future__ import annotations

import logging
import re
from typing import Iterable
from urllib.parse import urlparse

logger = logging.getLogger("uiinspector.selectors")

_CSS_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")
_XML_ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9._-]*$")
_CSS_RESERVED_PATTERN = re.compile(r"([:#.\[\]@!\"$%&'()*+,/;<=>?\\^`{|}~])")

# schemes whose "path" is a payload rather than a location
_OPAQUE_SCHEMES = {"data", "javascript", "blob"}


def normalize_space(value: str | None, limit: int = 200) -> str:
    if not value:
        return ""
    compact = re.sub(r"\s+", " ", str(value)).strip()
    return compact[:limit] if compact else ""


def is_valid_css_identifier(value: str | None) -> bool:
    if not value:
        return False
    return _CSS_IDENTIFIER_PATTERN.fullmatch(value) is not None


def is_valid_xml_attribute_name(value: str | None) -> bool:
    if not value:
        return False
    return _XML_ATTRIBUTE_NAME_PATTERN.fullmatch(value) is not None


def escape_css_identifier(value: str) -> str:
    return _CSS_RESERVED_PATTERN.sub(r"\\\1", value)


def escape_css_attribute_value(value: str | None) -> str:
    if value is None:
        return ""
    return value.replace("'", "\\'")


def xpath_literal(value: str | None) -> str:
    """Quote ``value`` as an XPath 1.0 string literal.

    XPath 1.0 has no escape sequence inside a literal, so a value holding a
    single quote is split on it and stitched back together with ``concat()``,
    each quote supplied as a double-quoted fragment::

        o'brien  ->  concat('o', "'", 'brien')
    """
    text = value or ""
    if "'" not in text:
        return f"'{text}'"
    pieces = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{piece}'" for piece in pieces) + ")"


def extract_url_path(url: str | None) -> str | None:
    """Path component of an absolute URL, or ``None`` when there is none."""
    if not url:
        return None
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        logger.debug("Skipping unparsable URL %r", url)
        return None

    scheme = parsed.scheme.lower()
    if not scheme or scheme in _OPAQUE_SCHEMES:
        return None
    if parsed.netloc:
        return parsed.path or "/"
    return parsed.path or None


def extract_file_name(path: str | None) -> str | None:
    if not path:
        return None
    try:
        parsed = urlparse(path.strip())
    except ValueError:
        logger.debug("Skipping unparsable source path %r", path)
        return None

    if parsed.scheme.lower() in _OPAQUE_SCHEMES:
        return None
    # drive letters ("C:\...") parse as a scheme without a host
    location = path if parsed.scheme and not parsed.netloc else parsed.path
    segment = re.split(r"[\\/]", location.strip())[-1]
    return segment or None


def dedupe_preserving_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique
