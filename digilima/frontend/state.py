from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

import httpx

from digilima.frontend.i18n import DEFAULT_LANGUAGE

LANG_STORAGE_KEY = "digilima_lang"


@dataclass
class AppState:
    """Page-scoped application state.

    ``lang`` is written only by the language switcher; every other region
    reads it.
    """
    lang: str = DEFAULT_LANGUAGE


class PreferenceStore(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


@dataclass
class MemoryPreferenceStore:
    """Dict-backed preference store with the browser's localStorage semantics"""
    items: Dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = str(value)


@dataclass
class PageLocation:
    """Current page URL plus the history entries replaced so far"""
    url: str
    history: List[str] = field(default_factory=list)

    def query_param(self, name: str) -> Optional[str]:
        return httpx.URL(self.url).params.get(name)

    def replace_state(self, url: str) -> None:
        self.history.append(url)
        self.url = url
