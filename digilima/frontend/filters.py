from dataclasses import dataclass, field
from typing import Callable, List

from digilima.frontend.elements import Element, FormField

ItemMatcher = Callable[[Element, str], bool]


@dataclass(eq=False)
class BlogItem(Element):
    """A ``.blog-item`` card; ``heading`` and ``excerpt`` are its h3 and p text"""
    heading: str = ""
    excerpt: str = ""


@dataclass(eq=False)
class FilterGroupView:
    """A row of filter buttons and the items they show or hide"""
    buttons: List[Element]
    items: List[Element] = field(default_factory=list)


def matches_portfolio_filter(item: Element, value: str) -> bool:
    # "*" shows everything, ".web" shows items with the "web" class
    return value == "*" or item.has_class(value.replace(".", "", 1))


def matches_blog_category(item: Element, value: str) -> bool:
    categories = item.get_attribute("data-categories")
    return value == "*" or bool(categories and value in categories)


def set_item_visible(item: Element, visible: bool) -> None:
    item.hidden = not visible
    if visible:
        item.add_class("fade-in")


class FilterGroupController:
    def __init__(self, view: FilterGroupView, attribute: str, matcher: ItemMatcher):
        self.view = view
        self.attribute = attribute
        self.matcher = matcher

    def bind(self) -> None:
        for button in self.view.buttons:
            button.add_event_listener("click", self.select)

    def select(self, button: Element) -> None:
        for other in self.view.buttons:
            other.remove_class("active")
        button.add_class("active")
        self.apply(button.get_attribute(self.attribute) or "*")

    def apply(self, value: str) -> None:
        for item in self.view.items:
            set_item_visible(item, self.matcher(item, value))


def portfolio_filter(view: FilterGroupView) -> FilterGroupController:
    return FilterGroupController(view, "data-filter", matches_portfolio_filter)


def blog_category_filter(view: FilterGroupView) -> FilterGroupController:
    return FilterGroupController(view, "data-category", matches_blog_category)


class BlogSearchController:
    """Free-text search over blog cards by heading and excerpt"""

    def __init__(self, search_input: FormField, items: List[BlogItem]):
        self.search_input = search_input
        self.items = items

    def bind(self) -> None:
        self.search_input.add_event_listener("input", lambda search_input: self.search(search_input.value))

    def search(self, query: str) -> None:
        term = query.lower().strip()
        for item in self.items:
            visible = not term or term in item.heading.lower() or term in item.excerpt.lower()
            set_item_visible(item, visible)
