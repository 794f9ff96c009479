"""Plain-text contact-card export (.vcf-style), one block per contact.

Field values are written as-is, without escaping.
"""

import logging
from pathlib import Path

from agenda.domain import Contact

logger = logging.getLogger(__name__)

DEFAULT_LINKEDIN_PREFIX = "https://www.linkedin.com/in/"


def format_card(contact: Contact, linkedin_prefix: str = DEFAULT_LINKEDIN_PREFIX) -> str:
    lines = ["BEGIN:CARD", "VERSION:3.0", f"FN:{contact.name}"]
    if contact.phone and contact.phone.strip():
        lines.append(f"TEL;TYPE=CELL:{contact.phone}")
    # Always exactly one EMAIL line.
    if contact.email and contact.email.strip():
        lines.append(f"EMAIL:{contact.email}")
    else:
        lines.append("EMAIL;")
    # linkedin and website default to "" so the None branches only matter for
    # records built outside the store.
    if contact.linkedin is not None:
        lines.append(f"LINKEDIN:{linkedin_prefix}{contact.linkedin}")
    else:
        lines.append("LINKEDIN;")
    if contact.website is not None:
        lines.append(f"WEBSITE:{contact.website}")
    else:
        lines.append("WEBSITE;")
    lines.append("END:CARD")
    return "\n".join(lines) + "\n\n"


def export_cards(
    contacts: list[Contact], linkedin_prefix: str = DEFAULT_LINKEDIN_PREFIX
) -> str:
    return "".join(format_card(c, linkedin_prefix) for c in contacts)


def write_cards(
    path: str | Path,
    contacts: list[Contact],
    linkedin_prefix: str = DEFAULT_LINKEDIN_PREFIX,
) -> bool:
    """Write every contact to a card file. Returns False if the file could not be written."""
    try:
        Path(path).write_text(export_cards(contacts, linkedin_prefix), encoding="utf-8")
    except OSError:
        logger.exception("Could not export cards to %s", path)
        return False
    logger.info("Exported %d contacts to %s", len(contacts), path)
    return True
