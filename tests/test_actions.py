"""Tests for UriContactActions. The opener is replaced; no browser is launched."""

from agenda.domain import Contact
from agenda.infrastructure import UriContactActions


def _actions(**kwargs):
    opened: list[str] = []
    return UriContactActions(opener=opened.append, **kwargs), opened


def test_call_and_message_use_dialable_numbers():
    actions, opened = _actions()
    actions.call("+34 600 111 222")
    actions.message("555 1234")
    assert opened == ["tel:+34600111222", "smsto:5551234"]


def test_default_region_applies_to_local_numbers():
    actions, opened = _actions(default_region="US")
    actions.call("202 555 1234")
    assert opened == ["tel:+12025551234"]


def test_open_linkedin_builds_profile_url():
    actions, opened = _actions()
    actions.open_linkedin("pedro")
    actions.open_linkedin("  ")
    assert opened == ["https://www.linkedin.com/in/pedro"]

    custom, custom_opened = _actions(linkedin_prefix="https://li.example/")
    custom.open_linkedin("pedro")
    assert custom_opened == ["https://li.example/pedro"]


def test_open_website_adds_scheme_when_missing():
    actions, opened = _actions()
    actions.open_website("ana.dev")
    actions.open_website("http://bob.example/path")
    actions.open_website("")
    assert opened == ["https://ana.dev", "http://bob.example/path"]


def test_open_item_goes_to_item_callback():
    items: list[Contact] = []
    actions, opened = _actions(on_open_item=items.append)
    contact = Contact(id=4, name="Ana", phone="555")
    actions.open_item(contact)
    assert items == [contact]
    assert opened == []
