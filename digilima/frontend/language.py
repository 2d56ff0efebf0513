import logging
from typing import List, Optional

import httpx

from digilima.frontend.elements import Document, Element
from digilima.frontend.i18n import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from digilima.frontend.state import LANG_STORAGE_KEY, AppState, PageLocation, PreferenceStore
from digilima.frontend.telemetry import NullTelemetry, Telemetry

logger = logging.getLogger(__name__)

TEXT_ENTRY_TAGS = ("input", "textarea")


class LanguageSwitcher:
    """Owns ``AppState.lang`` and applies a language to the whole page.

    A language is applied by copying each element's ``data-{lang}``
    attribute into its text (or placeholder for text entries), restyling
    the ``.lang-toggle`` buttons, remembering the choice in the preference
    store and mirroring it into the ``lang`` query parameter.
    """

    def __init__(
        self,
        document: Document,
        toggles: List[Element],
        state: AppState,
        store: PreferenceStore,
        location: PageLocation,
        telemetry: Optional[Telemetry] = None,
    ):
        self.document = document
        self.toggles = toggles
        self.state = state
        self.store = store
        self.location = location
        self.telemetry = telemetry or NullTelemetry()

    def bind(self) -> None:
        self.state.lang = self.document.html.get_attribute("data-lang") or DEFAULT_LANGUAGE
        self._update_toggles()
        for toggle in self.toggles:
            toggle.add_event_listener("click", self.on_toggle_click)

    def init_from_url(self) -> None:
        """Apply ``?lang=`` if present, otherwise the stored preference."""
        lang_param = self.location.query_param("lang")
        stored_lang = self.store.get_item(LANG_STORAGE_KEY)

        if lang_param in SUPPORTED_LANGUAGES:
            self.switch_language(lang_param)
        elif stored_lang in SUPPORTED_LANGUAGES:
            self.switch_language(stored_lang)

    def on_toggle_click(self, toggle: Element) -> None:
        new_lang = toggle.get_attribute("data-lang")
        self.telemetry.track("language_switch", {"language": new_lang})
        if new_lang not in SUPPORTED_LANGUAGES:
            logger.warning(f"Ignoring toggle for unsupported language {new_lang!r}")
            return
        if new_lang != self.state.lang:
            self.switch_language(new_lang)

    def switch_language(self, lang: str) -> None:
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {lang}")

        self.state.lang = lang
        self.document.html.set_attribute("lang", lang)
        self.document.html.set_attribute("data-lang", lang)

        self._update_translatable_elements(lang)
        self._update_toggles()
        self._update_placeholders(lang)

        self.store.set_item(LANG_STORAGE_KEY, lang)
        self._update_url(lang)

    def _update_translatable_elements(self, lang: str) -> None:
        attribute = f"data-{lang}"
        for element in self.document.with_attribute(attribute):
            translation = element.get_attribute(attribute)
            if element.tag in TEXT_ENTRY_TAGS:
                element.placeholder = translation
            elif element.tag == "meta":
                element.set_attribute("content", translation)
            else:
                element.text = translation

    def _update_toggles(self) -> None:
        for toggle in self.toggles:
            if toggle.get_attribute("data-lang") == self.state.lang:
                toggle.add_class("active", "btn-primary")
                toggle.remove_class("btn-outline-secondary")
            else:
                toggle.remove_class("active", "btn-primary")
                toggle.add_class("btn-outline-secondary")

    def _update_placeholders(self, lang: str) -> None:
        attribute = f"data-placeholder-{lang}"
        for element in self.document.with_attribute(attribute):
            element.placeholder = element.get_attribute(attribute)

    def _update_url(self, lang: str) -> None:
        url = httpx.URL(self.location.url)
        if lang == DEFAULT_LANGUAGE:
            url = url.copy_remove_param("lang")
        else:
            url = url.copy_set_param("lang", lang)
        self.location.replace_state(str(url))
