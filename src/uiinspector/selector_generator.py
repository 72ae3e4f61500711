from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .models import ElementAttributes, LocatorType, SelectorCandidate
from .selector_rules import (
    dedupe_preserving_order,
    escape_css_attribute_value,
    escape_css_identifier,
    extract_file_name,
    extract_url_path,
    is_valid_css_identifier,
    is_valid_xml_attribute_name,
    xpath_literal,
)

logger = logging.getLogger("uiinspector.selectors")

MAX_TEXT_LENGTH = 50
MAX_XPATH_CLASS_TOKENS = 2
MAX_CSS_CLASS_TOKENS = 3
MAX_DATA_ATTRIBUTES = 2

XPATH_FALLBACK = "//*"
CSS_FALLBACK = "*"

Strategy = Callable[[ElementAttributes], list[str]]


def _tag(record: ElementAttributes) -> str | None:
    return record.tag_name.lower() if record.tag_name else None


def _parent_tag(record: ElementAttributes) -> str | None:
    parent = record.parent_tag()
    return parent.lower() if parent else None


def _short_text(record: ElementAttributes) -> str | None:
    text = (record.inner_text or "").strip()
    if not text or len(text) >= MAX_TEXT_LENGTH:
        return None
    return text


def _valid_classes(record: ElementAttributes) -> list[str]:
    return [token for token in record.class_tokens() if is_valid_css_identifier(token)]


# XPath catalog


def _xpath_id(record: ElementAttributes) -> list[str]:
    if not record.id:
        return []
    return [f"//*[@id={xpath_literal(record.id)}]"]


def _xpath_name(record: ElementAttributes) -> list[str]:
    if not record.name:
        return []
    return [f"//*[@name={xpath_literal(record.name)}]"]


def _xpath_tag_and_class(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    classes = record.class_tokens()[:MAX_XPATH_CLASS_TOKENS]
    if not tag or not classes:
        return []
    predicates = "".join(f"[contains(@class,{xpath_literal(token)})]" for token in classes)
    return [f"//{tag}{predicates}"]


def _xpath_text(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    text = _short_text(record)
    if not tag or not text:
        return []
    literal = xpath_literal(text)
    return [
        f"//{tag}[normalize-space()={literal}]",
        f"//{tag}[contains(text(),{literal})]",
    ]


def _xpath_link_and_media(record: ElementAttributes) -> list[str]:
    selectors: list[str] = []
    if record.href:
        selectors.append(f"//a[@href={xpath_literal(record.href)}]")
        href_path = extract_url_path(record.href)
        if href_path:
            selectors.append(f"//a[contains(@href,{xpath_literal(href_path)})]")
    if record.src:
        file_name = extract_file_name(record.src)
        if file_name:
            selectors.append(f"//img[contains(@src,{xpath_literal(file_name)})]")
    return selectors


def _xpath_accessibility(record: ElementAttributes) -> list[str]:
    selectors: list[str] = []
    if record.aria_label:
        selectors.append(f"//*[@aria-label={xpath_literal(record.aria_label)}]")
    if record.role:
        selectors.append(f"//*[@role={xpath_literal(record.role)}]")
    return selectors


def _xpath_data_attributes(record: ElementAttributes) -> list[str]:
    return [
        f"//*[@{key}={xpath_literal(value)}]"
        for key, value in record.data_attributes[:MAX_DATA_ATTRIBUTES]
        if is_valid_xml_attribute_name(key)
    ]


def _xpath_position(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    parent = _parent_tag(record)
    if not tag or not parent:
        return []
    if record.child_ordinal_index is None:
        return [f"//{parent}/{tag}"]
    return [f"//{parent}/{tag}[{record.child_ordinal_index + 1}]"]


def _xpath_automation_id(record: ElementAttributes) -> list[str]:
    if not record.automation_id:
        return []
    return [f"//*[@AutomationId={xpath_literal(record.automation_id)}]"]


XPATH_STRATEGIES: tuple[Strategy, ...] = (
    _xpath_id,
    _xpath_name,
    _xpath_tag_and_class,
    _xpath_text,
    _xpath_link_and_media,
    _xpath_accessibility,
    _xpath_data_attributes,
    _xpath_position,
    _xpath_automation_id,
)


# CSS catalog


def _css_id(record: ElementAttributes) -> list[str]:
    if not is_valid_css_identifier(record.id):
        return []
    return [f"#{escape_css_identifier(record.id)}"]


def _css_classes(record: ElementAttributes) -> list[str]:
    classes = [f".{escape_css_identifier(token)}" for token in _valid_classes(record)]
    if not classes:
        return []
    return ["".join(classes[:MAX_CSS_CLASS_TOKENS]), classes[0]]


def _css_tag_and_class(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    classes = _valid_classes(record)
    if not tag or not classes:
        return []
    return [f"{tag}.{escape_css_identifier(classes[0])}"]


def _css_attributes(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    selectors: list[str] = []
    if tag and record.name:
        selectors.append(f"{tag}[name='{escape_css_attribute_value(record.name)}']")
    if record.input_type:
        selectors.append(f"input[type='{escape_css_attribute_value(record.input_type)}']")
    if record.href:
        selectors.append(f"a[href='{escape_css_attribute_value(record.href)}']")
        href_path = extract_url_path(record.href)
        if href_path:
            selectors.append(f"a[href*='{escape_css_attribute_value(href_path)}']")
    return selectors


def _css_position(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    ordinal = record.child_ordinal_index
    if not tag or ordinal is None:
        return []
    selectors = [f"{tag}:nth-of-type({ordinal + 1})"]
    if ordinal == 0:
        selectors.append(f"{tag}:first-of-type")
    return selectors


def _css_accessibility(record: ElementAttributes) -> list[str]:
    selectors: list[str] = []
    if record.aria_label:
        selectors.append(f"[aria-label='{escape_css_attribute_value(record.aria_label)}']")
    if record.role:
        selectors.append(f"[role='{escape_css_attribute_value(record.role)}']")
    return selectors


def _css_data_attributes(record: ElementAttributes) -> list[str]:
    return [
        f"[{key}='{escape_css_attribute_value(value)}']"
        for key, value in record.data_attributes[:MAX_DATA_ATTRIBUTES]
        if is_valid_css_identifier(key)
    ]


def _css_child_combinator(record: ElementAttributes) -> list[str]:
    tag = _tag(record)
    parent = _parent_tag(record)
    if not tag or not parent:
        return []
    selectors = [f"{parent} > {tag}"]
    classes = _valid_classes(record)
    if classes:
        selectors.append(f"{parent} > {tag}.{escape_css_identifier(classes[0])}")
    return selectors


CSS_STRATEGIES: tuple[Strategy, ...] = (
    _css_id,
    _css_classes,
    _css_tag_and_class,
    _css_attributes,
    _css_position,
    _css_accessibility,
    _css_data_attributes,
    _css_child_combinator,
)


def _coerce_record(record: ElementAttributes | Mapping[str, Any] | None) -> ElementAttributes:
    if record is None:
        raise ValueError("Element attributes are required to generate selectors.")
    if isinstance(record, ElementAttributes):
        return record
    if isinstance(record, Mapping):
        return ElementAttributes.from_mapping(record)
    raise TypeError(f"Unsupported element attribute record: {type(record).__name__}")


def _run_strategies(record: ElementAttributes, strategies: Iterable[Strategy], label: str) -> list[str]:
    emitted: list[str] = []
    for strategy in strategies:
        emitted.extend(strategy(record))
    unique = dedupe_preserving_order(emitted)
    logger.debug(
        "%s strategies for <%s>: %d candidate(s), %d duplicate(s) dropped",
        label,
        record.tag_name or "?",
        len(unique),
        len(emitted) - len(unique),
    )
    return unique


def generate_xpath_strategies(record: ElementAttributes | Mapping[str, Any]) -> list[str]:
    return _run_strategies(_coerce_record(record), XPATH_STRATEGIES, "XPath")


def generate_css_strategies(record: ElementAttributes | Mapping[str, Any]) -> list[str]:
    return _run_strategies(_coerce_record(record), CSS_STRATEGIES, "CSS")


def generate_selector_candidates(record: ElementAttributes | Mapping[str, Any]) -> list[SelectorCandidate]:
    attributes = _coerce_record(record)
    candidates = [SelectorCandidate("XPath", locator) for locator in generate_xpath_strategies(attributes)]
    candidates.extend(SelectorCandidate("CSS", locator) for locator in generate_css_strategies(attributes))
    return candidates


def choose_optimal(candidates: list[str], locator_type: LocatorType) -> str:
    """Pick one selector from a ranked list.

    Identifier-based selectors win outright (first one in rank order). Otherwise
    the shortest selector is taken, the earlier one on equal length, as a proxy
    for the fewest structural conditions. Uniqueness is never checked.
    """
    if locator_type == "XPath":
        preferred = next((item for item in candidates if "@id=" in item), None)
        fallback = XPATH_FALLBACK
    else:
        preferred = next((item for item in candidates if item.startswith("#")), None)
        fallback = CSS_FALLBACK

    if preferred is not None:
        return preferred
    if not candidates:
        return fallback
    return min(candidates, key=len)


def get_optimal_xpath(record: ElementAttributes | Mapping[str, Any]) -> str:
    return choose_optimal(generate_xpath_strategies(record), "XPath")


def get_optimal_css_selector(record: ElementAttributes | Mapping[str, Any]) -> str:
    return choose_optimal(generate_css_strategies(record), "CSS")
