"""
Page element model
Typed stand-ins for the pieces of the site's markup the interactive code
touches: plain elements, form fields, buttons, the live region and the
document itself.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set

EventHandler = Callable[["Element"], Any]


@dataclass(eq=False)
class Element:
    """An element with attributes, CSS classes, text and event listeners"""
    tag: str = "div"
    attrs: Dict[str, str] = field(default_factory=dict)
    classes: Set[str] = field(default_factory=set)
    text: str = ""
    hidden: bool = False
    listeners: Dict[str, List[EventHandler]] = field(default_factory=dict, repr=False)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attrs.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, *names: str) -> None:
        self.classes.update(names)

    def remove_class(self, *names: str) -> None:
        self.classes.difference_update(names)

    @property
    def placeholder(self) -> str:
        return self.attrs.get("placeholder", "")

    @placeholder.setter
    def placeholder(self, value: str) -> None:
        self.attrs["placeholder"] = value

    def add_event_listener(self, event: str, handler: EventHandler) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str) -> None:
        """Run the listeners registered for ``event`` in registration order."""
        for handler in list(self.listeners.get(event, ())):
            handler(self)


@dataclass(eq=False)
class FormField(Element):
    """An input, select, textarea or checkbox inside a form.

    ``error_text`` is the content of the field's ``.invalid-feedback`` sibling.
    """
    tag: str = "input"
    name: str = ""
    type: str = "text"
    required: bool = False
    value: str = ""
    checked: bool = False
    error_text: str = ""

    def form_value(self) -> Optional[str]:
        """The value a browser would put into FormData for this field"""
        if self.type == "checkbox":
            return self.attrs.get("value", "on") if self.checked else None
        return self.value

    def reset(self) -> None:
        """Restore the markup default, as ``form.reset()`` does"""
        if self.type == "checkbox":
            self.checked = "checked" in self.attrs
        else:
            self.value = self.attrs.get("value", "")


@dataclass(eq=False)
class Button(Element):
    tag: str = "button"
    type: str = "submit"
    disabled: bool = False
    busy: bool = False


@dataclass(eq=False)
class LiveRegion(Element):
    """Polite ARIA live region used to announce outcomes to screen readers"""
    attrs: Dict[str, str] = field(
        default_factory=lambda: {"id": "live-region", "aria-live": "polite", "aria-atomic": "true"}
    )
    classes: Set[str] = field(default_factory=lambda: {"sr-only"})

    def announce(self, message: str) -> None:
        self.text = message

    def clear(self) -> None:
        self.text = ""


@dataclass(eq=False)
class Document:
    """The page root: the ``<html>`` element, the body and translatable content.

    ``elements`` holds every element carrying translations, in document
    order, including ``<title>`` and the description ``<meta>``.
    """
    html: Element = field(default_factory=lambda: Element(tag="html", attrs={"lang": "en"}))
    body: Element = field(default_factory=lambda: Element(tag="body"))
    elements: List[Element] = field(default_factory=list)

    def with_attribute(self, name: str) -> List[Element]:
        return [element for element in self.elements if element.get_attribute(name)]

    @property
    def title_element(self) -> Optional[Element]:
        return next((e for e in self.elements if e.tag == "title"), None)

    @property
    def title(self) -> str:
        element = self.title_element
        return element.text if element else ""

    @property
    def meta_description(self) -> Optional[Element]:
        return next(
            (e for e in self.elements if e.tag == "meta" and e.get_attribute("name") == "description"),
            None,
        )
