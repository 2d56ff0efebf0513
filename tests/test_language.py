from __future__ import annotations

import pytest

from digilima.frontend.elements import Document, Element, FormField
from digilima.frontend.page import SitePage, init_page
from digilima.frontend.state import LANG_STORAGE_KEY, AppState, MemoryPreferenceStore, PageLocation
from digilima.frontend.language import LanguageSwitcher


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events = []

    def track(self, event, params) -> None:
        self.events.append((event, params))


def _make_page() -> SitePage:
    document = Document(
        elements=[
            Element(tag="title", text="DigiLima", attrs={"data-en": "DigiLima", "data-el": "DigiLima | Ιστοσελίδες"}),
            Element(
                tag="meta",
                attrs={
                    "name": "description",
                    "content": "Fast websites",
                    "data-en": "Fast websites",
                    "data-el": "Γρήγορες ιστοσελίδες",
                },
            ),
            Element(tag="h1", text="Hello", attrs={"data-en": "Hello", "data-el": "Γεια σας"}),
            Element(tag="a", text="Contact", attrs={"data-en": "Contact", "data-el": "Επικοινωνία"}),
            FormField(
                tag="textarea",
                name="message",
                attrs={"placeholder": "Your message", "data-en": "Your message", "data-el": "Το μήνυμά σας"},
            ),
            FormField(
                name="name",
                attrs={"placeholder": "Name", "data-placeholder-en": "Name", "data-placeholder-el": "Όνομα"},
            ),
        ]
    )
    toggles = [
        Element(tag="button", attrs={"data-lang": "en"}, classes={"lang-toggle"}),
        Element(tag="button", attrs={"data-lang": "el"}, classes={"lang-toggle"}),
    ]
    return SitePage(document=document, language_toggles=toggles)


def _element(page: SitePage, tag: str) -> Element:
    return next(e for e in page.document.elements if e.tag == tag)


def test_switch_to_greek_updates_every_translated_element() -> None:
    page = _make_page()
    store = MemoryPreferenceStore()
    location = PageLocation("https://digilima.com/")
    controllers = init_page(page, store, location)

    controllers.language.switch_language("el")

    assert _element(page, "h1").text == "Γεια σας"
    assert _element(page, "a").text == "Επικοινωνία"
    assert page.document.title == "DigiLima | Ιστοσελίδες"
    assert page.document.meta_description.get_attribute("content") == "Γρήγορες ιστοσελίδες"
    assert _element(page, "textarea").placeholder == "Το μήνυμά σας"
    assert _element(page, "input").placeholder == "Όνομα"
    assert page.document.html.get_attribute("lang") == "el"
    assert page.document.html.get_attribute("data-lang") == "el"
    assert controllers.state.lang == "el"


def test_switch_persists_choice_and_updates_url() -> None:
    page = _make_page()
    store = MemoryPreferenceStore()
    location = PageLocation("https://digilima.com/services/?ref=ad")
    controllers = init_page(page, store, location)

    controllers.language.switch_language("el")

    assert store.get_item(LANG_STORAGE_KEY) == "el"
    assert location.query_param("lang") == "el"
    assert location.query_param("ref") == "ad"

    controllers.language.switch_language("en")

    assert store.get_item(LANG_STORAGE_KEY) == "en"
    assert location.query_param("lang") is None
    assert location.query_param("ref") == "ad"


def test_toggles_reflect_active_language() -> None:
    page = _make_page()
    controllers = init_page(page, MemoryPreferenceStore(), PageLocation("https://digilima.com/"))
    en_toggle, el_toggle = page.language_toggles

    assert en_toggle.has_class("active")
    assert el_toggle.has_class("btn-outline-secondary")

    controllers.language.switch_language("el")

    assert el_toggle.has_class("active") and el_toggle.has_class("btn-primary")
    assert not en_toggle.has_class("active")
    assert en_toggle.has_class("btn-outline-secondary")


def test_stored_preference_is_restored_on_reload() -> None:
    store = MemoryPreferenceStore()
    first = init_page(_make_page(), store, PageLocation("https://digilima.com/"))
    first.language.switch_language("el")

    reloaded_page = _make_page()
    reloaded = init_page(reloaded_page, store, PageLocation("https://digilima.com/"))

    assert reloaded.state.lang == "el"
    assert _element(reloaded_page, "h1").text == "Γεια σας"
    assert reloaded_page.language_toggles[1].has_class("active")


def test_url_parameter_wins_over_stored_preference() -> None:
    store = MemoryPreferenceStore({LANG_STORAGE_KEY: "en"})

    controllers = init_page(_make_page(), store, PageLocation("https://digilima.com/?lang=el"))

    assert controllers.state.lang == "el"
    assert store.get_item(LANG_STORAGE_KEY) == "el"


def test_unsupported_url_parameter_is_ignored() -> None:
    store = MemoryPreferenceStore({LANG_STORAGE_KEY: "el"})

    controllers = init_page(_make_page(), store, PageLocation("https://digilima.com/?lang=fr"))

    assert controllers.state.lang == "el"


def test_toggle_click_switches_and_tracks() -> None:
    page = _make_page()
    telemetry = RecordingTelemetry()
    controllers = init_page(page, MemoryPreferenceStore(), PageLocation("https://digilima.com/"), telemetry=telemetry)

    page.language_toggles[1].dispatch("click")

    assert controllers.state.lang == "el"
    assert ("language_switch", {"language": "el"}) in telemetry.events


def test_clicking_active_toggle_keeps_url_untouched() -> None:
    page = _make_page()
    location = PageLocation("https://digilima.com/")
    init_page(page, MemoryPreferenceStore(), location)

    page.language_toggles[0].dispatch("click")

    assert location.history == []


def test_switch_language_rejects_unknown_language() -> None:
    page = _make_page()
    switcher = LanguageSwitcher(
        page.document,
        page.language_toggles,
        AppState(),
        MemoryPreferenceStore(),
        PageLocation("https://digilima.com/"),
    )

    with pytest.raises(ValueError):
        switcher.switch_language("fr")


def test_init_page_marks_body_loaded() -> None:
    page = _make_page()

    init_page(page, MemoryPreferenceStore(), PageLocation("https://digilima.com/"))

    assert page.document.body.has_class("loaded")


def test_cta_clicks_are_tracked_with_button_text() -> None:
    page = _make_page()
    page.cta_buttons = [Element(tag="a", text="  Get a Quote \n", classes={"btn", "btn-primary"})]
    telemetry = RecordingTelemetry()
    init_page(page, MemoryPreferenceStore(), PageLocation("https://digilima.com/"), telemetry=telemetry)

    page.cta_buttons[0].dispatch("click")

    assert telemetry.events == [("cta_click", {"button_text": "Get a Quote"})]
