from __future__ import annotations

from typing import Any, Mapping

from playwright.sync_api import ElementHandle

from .models import ElementAttributes
from .selector_rules import normalize_space

_ATTRIBUTE_SCRIPT = """
(el) => {
  const dataAttributes = [];
  for (const attr of Array.from(el.attributes || [])) {
    if (attr.name.startsWith('data-')) {
      dataAttributes.push([attr.name, attr.value]);
    }
  }

  let ordinal = 0;
  let sibling = el;
  while ((sibling = sibling.previousElementSibling)) {
    if (sibling.tagName === el.tagName) ordinal += 1;
  }

  const parent = el.parentElement;
  return {
    tagName: (el.tagName || '').toLowerCase(),
    id: el.id || null,
    name: el.getAttribute('name'),
    className: el.getAttribute('class'),
    innerText: (el.innerText || el.textContent || '').trim().replace(/\\s+/g, ' ').slice(0, 200),
    href: el.getAttribute('href'),
    src: el.getAttribute('src'),
    inputType: el.tagName.toLowerCase() === 'input' ? (el.getAttribute('type') || 'text') : null,
    role: el.getAttribute('role'),
    ariaLabel: el.getAttribute('aria-label'),
    dataAttributes,
    parentTagName: parent ? parent.tagName.toLowerCase() : null,
    parentName: parent ? (parent.getAttribute('name') || parent.id || null) : null,
    childOrdinalIndex: parent ? ordinal : null,
  };
}
"""


def payload_to_attributes(payload: Mapping[str, Any]) -> ElementAttributes:
    cleaned = dict(payload)
    cleaned["innerText"] = normalize_space(payload.get("innerText"), limit=200) or None
    return ElementAttributes.from_mapping(cleaned)


def extract_element_attributes(element: ElementHandle) -> ElementAttributes:
    payload = element.evaluate(_ATTRIBUTE_SCRIPT)
    if not isinstance(payload, dict):
        payload = {}
    return payload_to_attributes(payload)
