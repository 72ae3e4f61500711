from __future__ import annotations

from .models import ElementAttributes, LocatorType, SelectorCandidate
from .selector_generator import (
    generate_css_strategies,
    generate_selector_candidates,
    generate_xpath_strategies,
    get_optimal_css_selector,
    get_optimal_xpath,
)

__version__ = "0.1.0"

__all__ = [
    "ElementAttributes",
    "LocatorType",
    "SelectorCandidate",
    "generate_css_strategies",
    "generate_selector_candidates",
    "generate_xpath_strategies",
    "get_optimal_css_selector",
    "get_optimal_xpath",
]
