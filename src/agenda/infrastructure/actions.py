"""ContactActions adapter that turns row actions into URIs and opens them."""

import logging
import webbrowser
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from agenda.domain import Contact
from agenda.infrastructure.cards import DEFAULT_LINKEDIN_PREFIX
from agenda.infrastructure.phone import dialable

logger = logging.getLogger(__name__)


def website_url(url: str) -> str:
    url = url.strip()
    if urlsplit(url).scheme:
        return url
    return f"https://{url}"


class UriContactActions:
    """Builds tel:, smsto: and web URIs and hands them to opener (webbrowser.open by default)."""

    def __init__(
        self,
        *,
        opener: Callable[[str], Any] | None = None,
        on_open_item: Callable[[Contact], Any] | None = None,
        linkedin_prefix: str = DEFAULT_LINKEDIN_PREFIX,
        default_region: str | None = None,
    ) -> None:
        self._opener = opener
        self._on_open_item = on_open_item
        self._linkedin_prefix = linkedin_prefix
        self._default_region = default_region

    def _open(self, uri: str) -> None:
        logger.info("Opening %s", uri)
        (self._opener or webbrowser.open)(uri)

    def call(self, phone: str) -> None:
        self._open(f"tel:{dialable(phone, self._default_region)}")

    def message(self, phone: str) -> None:
        self._open(f"smsto:{dialable(phone, self._default_region)}")

    def open_item(self, contact: Contact) -> None:
        if self._on_open_item is not None:
            self._on_open_item(contact)

    def open_linkedin(self, profile: str) -> None:
        profile = (profile or "").strip()
        if not profile:
            return
        self._open(f"{self._linkedin_prefix}{profile}")

    def open_website(self, url: str) -> None:
        if not url or not url.strip():
            return
        self._open(website_url(url))
