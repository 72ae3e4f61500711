from uiinspector.models import ElementAttributes
from uiinspector.selector_generator import generate_xpath_strategies


def test_login_button_xpaths_start_with_id() -> None:
    xpaths = generate_xpath_strategies(
        {"id": "login-btn", "tagName": "button", "className": "btn primary", "childOrdinalIndex": 2}
    )
    assert xpaths == [
        "//*[@id='login-btn']",
        "//button[contains(@class,'btn')][contains(@class,'primary')]",
    ]


def test_rule_order_follows_confidence() -> None:
    record = ElementAttributes(
        id="save",
        name="saveAction",
        tag_name="BUTTON",
        class_name="btn btn-primary wide",
        inner_text="  Save  ",
        aria_label="Save changes",
        role="button",
        data_attributes=(("data-testid", "save-btn"), ("data-qa", "save"), ("data-extra", "ignored")),
        parent_tag_name="FORM",
        child_ordinal_index=0,
        automation_id="SaveButton",
    )

    assert generate_xpath_strategies(record) == [
        "//*[@id='save']",
        "//*[@name='saveAction']",
        "//button[contains(@class,'btn')][contains(@class,'btn-primary')]",
        "//button[normalize-space()='Save']",
        "//button[contains(text(),'Save')]",
        "//*[@aria-label='Save changes']",
        "//*[@role='button']",
        "//*[@data-testid='save-btn']",
        "//*[@data-qa='save']",
        "//form/button[1]",
        "//*[@AutomationId='SaveButton']",
    ]


def test_text_rule_requires_tag_and_short_text() -> None:
    assert generate_xpath_strategies({"innerText": "Submit"}) == []

    at_limit = generate_xpath_strategies({"tagName": "p", "innerText": "x" * 50})
    assert not any("normalize-space" in item for item in at_limit)

    under_limit = generate_xpath_strategies({"tagName": "p", "innerText": "x" * 49})
    assert f"//p[normalize-space()='{'x' * 49}']" in under_limit
    assert f"//p[contains(text(),'{'x' * 49}')]" in under_limit


def test_link_and_image_forms_use_path_and_file_name() -> None:
    xpaths = generate_xpath_strategies(
        {
            "tagName": "a",
            "href": "https://example.com/page?x=1",
            "src": "https://cdn.example.com/img/logo.png?v=3",
            "parentTagName": "div",
        }
    )
    assert xpaths == [
        "//a[@href='https://example.com/page?x=1']",
        "//a[contains(@href,'/page')]",
        "//img[contains(@src,'logo.png')]",
        "//div/a",
    ]


def test_relative_or_malformed_href_skips_path_form() -> None:
    relative = generate_xpath_strategies({"href": "/docs/intro"})
    assert relative == ["//a[@href='/docs/intro']"]

    malformed = generate_xpath_strategies({"href": "http://[::1/broken"})
    assert malformed == ["//a[@href='http://[::1/broken']"]


def test_positional_rule_is_one_based() -> None:
    xpaths = generate_xpath_strategies({"tagName": "li", "parentTagName": "ul", "childOrdinalIndex": 3})
    assert xpaths == ["//ul/li[4]"]


def test_positional_rule_falls_back_to_parent_name() -> None:
    xpaths = generate_xpath_strategies({"tagName": "td", "parentName": "TR", "childOrdinalIndex": 0})
    assert xpaths == ["//tr/td[1]"]


def test_single_quote_uses_concat() -> None:
    xpaths = generate_xpath_strategies({"id": "o'brien"})
    assert xpaths == ["//*[@id=concat('o', \"'\", 'brien')]"]


def test_duplicates_are_dropped_keeping_first() -> None:
    xpaths = generate_xpath_strategies(
        {"id": "main", "ariaLabel": "Close", "dataAttributes": {"id": "main", "aria-label": "Close"}}
    )
    assert xpaths == ["//*[@id='main']", "//*[@aria-label='Close']"]
    assert len(xpaths) == len(set(xpaths))


def test_empty_record_yields_no_candidates() -> None:
    assert generate_xpath_strategies({}) == []
    assert generate_xpath_strategies(ElementAttributes()) == []


def test_generation_is_deterministic() -> None:
    raw = {"name": "q", "tagName": "input", "className": "search box", "dataAttributes": {"data-a": "1"}}
    assert generate_xpath_strategies(raw) == generate_xpath_strategies(dict(raw))


def test_data_attributes_with_invalid_names_are_skipped() -> None:
    raw = {"dataAttributes": {"data x": "1", "data-ok": "2"}}
    assert generate_xpath_strategies(raw) == ["//*[@data-ok='2']"]
