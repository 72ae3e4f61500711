from __future__ import annotations

from typing import Any, Mapping, Sequence

from .selector_rules import normalize_space, xpath_literal

_PREDICATE_KEYS = (
    ("automation_id", "AutomationId"),
    ("name", "Name"),
    ("class_name", "ClassName"),
)


def _segment(node: Mapping[str, Any]) -> str:
    control_type = normalize_space(node.get("control_type")) or "Unknown"
    for key, attribute in _PREDICATE_KEYS:
        value = normalize_space(node.get(key))
        if value:
            return f"{control_type}[@{attribute}={xpath_literal(value)}]"
    return control_type


def build_automation_path(chain: Sequence[Mapping[str, Any]]) -> str:
    """Build a desktop automation path such as
    ``/ControlType.Window[@Name='Login']/ControlType.Button[@AutomationId='ok']``.

    ``chain`` lists the target element first and its ancestors after it, up to
    but excluding the desktop root. Each segment is qualified by the first
    non-empty AutomationId, Name or ClassName.
    """
    if not chain:
        return ""
    return "/" + "/".join(_segment(node) for node in reversed(chain))
