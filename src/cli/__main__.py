"""
Command line front end: contacts store + ContactsRepository.
Run: python -m cli <command> (from repo root, with .env or env vars set).
"""
import argparse
import logging
import sys

from agenda.application import AgendaError, ContactsRepository, Err
from agenda.bootstrap import open_store
from agenda.config import Settings, load_settings
from agenda.domain import Category, Contact
from agenda.infrastructure import (
    CsvAddressBook,
    UriContactActions,
    read_backup,
    write_backup,
    write_cards,
)

logger = logging.getLogger(__name__)


def _format_contact(contact: Contact) -> str:
    """One contact as a list row: id, name, phone and any extras."""
    parts = [f"{contact.id:>4}  {contact.name}", contact.phone]
    if contact.email:
        parts.append(contact.email)
    if contact.linkedin:
        parts.append(f"in/{contact.linkedin}")
    if contact.website:
        parts.append(contact.website)
    return "  ".join(parts)


def _print_contacts(contacts: list[Contact]) -> None:
    if not contacts:
        print("No contacts.")
        return
    for contact in contacts:
        print(_format_contact(contact))


def _fail(result: Err) -> int:
    print(f"Error: {result.reason}", file=sys.stderr)
    return 1


def _require_contact(repo: ContactsRepository, contact_id: int) -> Contact | None:
    contact = repo.contact_by_id(contact_id).value()
    if contact is None:
        print(f"No contact with id {contact_id}.", file=sys.stderr)
    return contact


def cmd_list(repo, args, settings) -> int:
    if args.category is not None:
        _print_contacts(repo.contacts_by_category(args.category).value())
    else:
        _print_contacts(repo.all_contacts().value())
    return 0


def cmd_search(repo, args, settings) -> int:
    _print_contacts(repo.search(args.query).value())
    return 0


def cmd_show(repo, args, settings) -> int:
    found = repo.get_contact_with_groups(args.id).value()
    if found is None:
        print(f"No contact with id {args.id}.", file=sys.stderr)
        return 1
    print(_format_contact(found.contact))
    if found.contact.category_id is not None:
        print(f"Category: {found.contact.category_id}")
    if found.groups:
        print("Groups: " + ", ".join(g.name for g in found.groups))
    return 0


def cmd_add(repo, args, settings) -> int:
    contact = Contact(
        id=args.id,
        name=args.name,
        phone=args.phone,
        email=args.email,
        category_id=args.category,
        linkedin=args.linkedin,
        website=args.website,
    )
    result = repo.save_contact_and_associate_groups(contact, args.group or [])
    if isinstance(result, Err):
        return _fail(result)
    print(f"Saved contact {result.value}.")
    return 0


def cmd_delete(repo, args, settings) -> int:
    contact = _require_contact(repo, args.id)
    if contact is None:
        return 1
    result = repo.delete_contact(contact)
    if isinstance(result, Err):
        return _fail(result)
    print(f"Deleted {contact.name}.")
    return 0


def cmd_categories(repo, args, settings) -> int:
    for category in repo.all_categories().value():
        print(f"{category.id:>4}  {category.name}")
    return 0


def cmd_category_delete(repo, args, settings) -> int:
    result = repo.delete_category(Category(id=args.id, name=""))
    if isinstance(result, Err):
        return _fail(result)
    print(f"Deleted category {args.id}.")
    return 0


def cmd_groups(repo, args, settings) -> int:
    for group in repo.all_groups().value():
        print(f"{group.id:>4}  {group.name}")
    return 0


def cmd_group_add(repo, args, settings) -> int:
    result = repo.create_group(args.name)
    if isinstance(result, Err):
        return _fail(result)
    return 0


def cmd_group_remove(repo, args, settings) -> int:
    result = repo.remove_contact_from_group(args.contact_id, args.group_id)
    if isinstance(result, Err):
        return _fail(result)
    return 0


def cmd_import(repo, args, settings) -> int:
    result = repo.import_from_address_book(CsvAddressBook(args.file))
    if isinstance(result, Err):
        return _fail(result)
    print(f"Imported {result.value} contacts.")
    return 0


def cmd_backup(repo, args, settings) -> int:
    result = repo.backup_all()
    if isinstance(result, Err):
        return _fail(result)
    if not write_backup(args.file, result.value):
        print(f"Could not write {args.file}.", file=sys.stderr)
        return 1
    print(f"Backed up {len(result.value)} contacts.")
    return 0


def cmd_restore(repo, args, settings) -> int:
    contacts = read_backup(args.file)
    if contacts is None:
        print(f"Nothing restored: {args.file} is not a valid backup.", file=sys.stderr)
        return 1
    result = repo.restore_all(contacts)
    if isinstance(result, Err):
        return _fail(result)
    print(f"Restored {result.value} contacts.")
    return 0


def cmd_export(repo, args, settings) -> int:
    contacts = repo.search(args.query or "").value()
    if not write_cards(args.file, contacts, settings.linkedin_url_prefix):
        print(f"Could not write {args.file}.", file=sys.stderr)
        return 1
    print(f"Exported {len(contacts)} contacts.")
    return 0


def _action(name: str):
    def run(repo, args, settings) -> int:
        contact = _require_contact(repo, args.id)
        if contact is None:
            return 1
        actions = UriContactActions(
            linkedin_prefix=settings.linkedin_url_prefix,
            default_region=settings.phone_region,
        )
        if name == "call":
            actions.call(contact.phone)
        elif name == "message":
            actions.message(contact.phone)
        elif name == "linkedin":
            actions.open_linkedin(contact.linkedin)
        else:
            actions.open_website(contact.website)
        return 0

    return run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agenda", description="Personal contacts manager.")
    parser.add_argument("--database-url", help="Overrides AGENDA_DATABASE_URL.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List contacts by name.")
    p.add_argument("--category", type=int, help="Only contacts in this category id.")
    p.set_defaults(handler=cmd_list)

    p = sub.add_parser("search", help="Contacts whose name or phone contains QUERY.")
    p.add_argument("query")
    p.set_defaults(handler=cmd_search)

    p = sub.add_parser("show", help="One contact with its groups.")
    p.add_argument("id", type=int)
    p.set_defaults(handler=cmd_show)

    p = sub.add_parser("add", help="Add a contact, or edit one with --id.")
    p.add_argument("--id", type=int, default=0)
    p.add_argument("--name", required=True)
    p.add_argument("--phone", required=True)
    p.add_argument("--email")
    p.add_argument("--category", type=int)
    p.add_argument("--linkedin", default="")
    p.add_argument("--website", default="")
    p.add_argument("--group", type=int, action="append", help="Group id (repeatable).")
    p.set_defaults(handler=cmd_add)

    p = sub.add_parser("delete", help="Delete a contact.")
    p.add_argument("id", type=int)
    p.set_defaults(handler=cmd_delete)

    p = sub.add_parser("categories", help="List categories.")
    p.set_defaults(handler=cmd_categories)

    p = sub.add_parser("category-delete", help="Delete a category; its contacts lose it.")
    p.add_argument("id", type=int)
    p.set_defaults(handler=cmd_category_delete)

    p = sub.add_parser("groups", help="List groups.")
    p.set_defaults(handler=cmd_groups)

    p = sub.add_parser("group-add", help="Create a group.")
    p.add_argument("name")
    p.set_defaults(handler=cmd_group_add)

    p = sub.add_parser("group-remove", help="Remove a contact from a group.")
    p.add_argument("contact_id", type=int)
    p.add_argument("group_id", type=int)
    p.set_defaults(handler=cmd_group_remove)

    p = sub.add_parser("import", help="Import new phone numbers from an address book CSV.")
    p.add_argument("file")
    p.set_defaults(handler=cmd_import)

    p = sub.add_parser("backup", help="Write every contact to a JSON backup.")
    p.add_argument("file")
    p.set_defaults(handler=cmd_backup)

    p = sub.add_parser("restore", help="Add every contact from a JSON backup.")
    p.add_argument("file")
    p.set_defaults(handler=cmd_restore)

    p = sub.add_parser("export", help="Export contacts to a card file.")
    p.add_argument("file")
    p.add_argument("--query", help="Only contacts matching this search.")
    p.set_defaults(handler=cmd_export)

    for name in ("call", "message", "linkedin", "website"):
        p = sub.add_parser(name, help=f"Open the {name} action for a contact.")
        p.add_argument("id", type=int)
        p.set_defaults(handler=_action(name))

    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )
    url = args.database_url or settings.database_url
    logger.debug("Opening contacts store at %s", url)
    try:
        db, repo = open_store(url)
    except AgendaError as e:
        print(f"Error: {e.reason}", file=sys.stderr)
        return 1
    try:
        return args.handler(repo, args, settings)
    finally:
        repo.close()
        db.close()


if __name__ == "__main__":
    sys.exit(main())
