"""
Page bootstrap
Wires every interactive region present on a page, in the order the site
expects: language first, then the contact form, then the filters.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from digilima.frontend.contact_form import ContactFormController, ContactFormView
from digilima.frontend.elements import Document, Element, FormField, LiveRegion
from digilima.frontend.filters import (
    BlogItem,
    BlogSearchController,
    FilterGroupController,
    FilterGroupView,
    blog_category_filter,
    portfolio_filter,
)
from digilima.frontend.language import LanguageSwitcher
from digilima.frontend.state import AppState, PageLocation, PreferenceStore
from digilima.frontend.telemetry import NullTelemetry, Telemetry, track_cta_clicks
from digilima.frontend.transport import ContactClient

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class SitePage:
    """The interactive regions of one page; regions a page lacks stay None"""
    document: Document
    language_toggles: List[Element] = field(default_factory=list)
    contact_form: Optional[ContactFormView] = None
    live_region: LiveRegion = field(default_factory=LiveRegion)
    portfolio: Optional[FilterGroupView] = None
    blog_categories: Optional[FilterGroupView] = None
    blog_search_input: Optional[FormField] = None
    blog_items: List[BlogItem] = field(default_factory=list)
    cta_buttons: List[Element] = field(default_factory=list)


@dataclass
class PageControllers:
    state: AppState
    language: LanguageSwitcher
    contact_form: Optional[ContactFormController] = None
    portfolio: Optional[FilterGroupController] = None
    blog_categories: Optional[FilterGroupController] = None
    blog_search: Optional[BlogSearchController] = None


def init_page(
    page: SitePage,
    store: PreferenceStore,
    location: PageLocation,
    client: Optional[ContactClient] = None,
    telemetry: Optional[Telemetry] = None,
) -> PageControllers:
    telemetry = telemetry or NullTelemetry()
    state = AppState()

    language = LanguageSwitcher(page.document, page.language_toggles, state, store, location, telemetry)
    language.init_from_url()
    language.bind()
    controllers = PageControllers(state=state, language=language)

    if page.contact_form is not None:
        controllers.contact_form = ContactFormController(
            page.contact_form,
            state,
            client or ContactClient(),
            telemetry=telemetry,
            live_region=page.live_region,
        )
        controllers.contact_form.bind()

    if page.portfolio is not None and page.portfolio.buttons:
        controllers.portfolio = portfolio_filter(page.portfolio)
        controllers.portfolio.bind()

    if page.blog_categories is not None and page.blog_categories.buttons:
        controllers.blog_categories = blog_category_filter(page.blog_categories)
        controllers.blog_categories.bind()

    if page.blog_search_input is not None:
        controllers.blog_search = BlogSearchController(page.blog_search_input, page.blog_items)
        controllers.blog_search.bind()

    track_cta_clicks(page.cta_buttons, telemetry)

    page.document.body.add_class("loaded")
    logger.info(f"Page initialized (lang={state.lang})")
    return controllers
