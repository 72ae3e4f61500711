from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping

LocatorType = Literal["XPath", "CSS"]

_STRING_FIELDS: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "name": ("name",),
    "automation_id": ("automationId", "automation_id"),
    "tag_name": ("tagName", "tag_name", "tag"),
    "class_name": ("className", "class_name", "class"),
    "parent_tag_name": ("parentTagName", "parent_tag_name"),
    "parent_name": ("parentName", "parent_name"),
    "inner_text": ("innerText", "inner_text", "text"),
    "href": ("href",),
    "src": ("src",),
    "input_type": ("inputType", "input_type", "type"),
    "role": ("role",),
    "aria_label": ("ariaLabel", "aria_label", "aria-label"),
}


@dataclass(frozen=True, slots=True)
class ElementAttributes:
    id: str | None = None
    name: str | None = None
    automation_id: str | None = None
    tag_name: str | None = None
    class_name: str | None = None
    parent_tag_name: str | None = None
    parent_name: str | None = None
    child_ordinal_index: int | None = None
    inner_text: str | None = None
    href: str | None = None
    src: str | None = None
    input_type: str | None = None
    role: str | None = None
    aria_label: str | None = None
    data_attributes: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ElementAttributes:
        values: dict[str, Any] = {}
        for field_name, keys in _STRING_FIELDS.items():
            values[field_name] = _first_clean(raw, keys, _clean)

        values["child_ordinal_index"] = _first_clean(
            raw, ("childOrdinalIndex", "child_ordinal_index", "childIndex"), _clean_ordinal
        )
        values["data_attributes"] = (
            _first_clean(raw, ("dataAttributes", "data_attributes"), _clean_pairs) or ()
        )
        return cls(**values)

    def class_tokens(self) -> list[str]:
        if not self.class_name:
            return []
        return self.class_name.split()

    def parent_tag(self) -> str | None:
        return self.parent_tag_name or self.parent_name


@dataclass(frozen=True, slots=True)
class SelectorCandidate:
    locator_type: LocatorType
    locator: str


def _first_clean(raw: Mapping[str, Any], keys: tuple[str, ...], clean: Callable[[Any], Any]) -> Any:
    # a blank value under one alias does not hide a usable one under the next
    for key in keys:
        if key not in raw:
            continue
        value = clean(raw[key])
        if value is not None and value != ():
            return value
    return None


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _clean_ordinal(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        ordinal = int(value)
    except (TypeError, ValueError):
        return None
    if ordinal < 0:
        return None
    return ordinal


def _clean_pairs(value: Any) -> tuple[tuple[str, str], ...]:
    if not value:
        return ()
    items = value.items() if isinstance(value, Mapping) else value
    pairs: list[tuple[str, str]] = []
    for item in items:
        try:
            key, raw_value = item
        except (TypeError, ValueError):
            continue
        clean_key = _clean(key)
        clean_value = _clean(raw_value)
        if clean_key and clean_value:
            pairs.append((clean_key, clean_value))
    return tuple(pairs)
