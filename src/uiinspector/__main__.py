from __future__ import annotations

import argparse
import sys
from typing import Sequence

_CHROMIUM_NOT_INSTALLED_HINTS = ("executable doesn't exist", "playwright install")


def _chromium_not_installed(exc: Exception) -> bool:
    """True when ``chromium.launch`` failed because the browser build is absent."""
    message = str(exc).lower()
    if "chromium" not in message and "chrome" not in message:
        return False
    return any(hint in message for hint in _CHROMIUM_NOT_INSTALLED_HINTS)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uiinspector",
        description="Print ranked XPath and CSS selectors for one element of a web page.",
    )
    parser.add_argument("url", help="Page to open.")
    parser.add_argument("selector", help="Playwright selector resolving the element to inspect.")
    parser.add_argument("--limit", type=int, default=5, help="Alternatives to print per language (default: 5).")
    parser.add_argument("--headed", action="store_true", help="Show the browser window.")
    return parser


def format_report(xpaths: Sequence[str], css: Sequence[str], optimal_xpath: str, optimal_css: str, limit: int) -> str:
    lines = [f"Optimal XPath: {optimal_xpath}", f"Optimal CSS:   {optimal_css}", "", "Alternative XPaths:"]
    lines.extend(f"  {index}. {item}" for index, item in enumerate(xpaths[:limit], start=1))
    lines.append("")
    lines.append("Alternative CSS Selectors:")
    lines.extend(f"  {index}. {item}" for index, item in enumerate(css[:limit], start=1))
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    if sys.version_info < (3, 11):
        raise SystemExit(
            "uiinspector requires Python 3.11+. "
            f"Current interpreter: {sys.executable} (Python {sys.version.split()[0]})"
        )
    args = _build_parser().parse_args(argv)
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ModuleNotFoundError as exc:
        if exc.name == "playwright":
            raise SystemExit(
                "playwright is not installed in this interpreter. "
                "Activate the project venv and run `pip install -e .`."
            ) from exc
        raise

    from .dom_extractor import extract_element_attributes
    from .log_config import build_logger
    from .selector_generator import (
        choose_optimal,
        generate_css_strategies,
        generate_xpath_strategies,
    )

    logger = build_logger()
    logger.info("Inspect started: %s %s", args.url, args.selector)
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=not args.headed)
            try:
                page = browser.new_page()
                page.goto(args.url)
                element = page.query_selector(args.selector)
                if element is None:
                    logger.warning("No element matched %s", args.selector)
                    print(f"No element matched selector: {args.selector}", file=sys.stderr)
                    return 1
                attributes = extract_element_attributes(element)
            finally:
                browser.close()
    except PlaywrightError as exc:
        if not _chromium_not_installed(exc):
            raise
        logger.exception("Browser launch failed.")
        print("Chromium is not installed. Run `playwright install chromium`.", file=sys.stderr)
        return 2

    xpaths = generate_xpath_strategies(attributes)
    css = generate_css_strategies(attributes)
    print(
        format_report(
            xpaths,
            css,
            choose_optimal(xpaths, "XPath"),
            choose_optimal(css, "CSS"),
            max(0, args.limit),
        )
    )
    logger.info("Inspect finished: %d XPath, %d CSS candidate(s)", len(xpaths), len(css))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
