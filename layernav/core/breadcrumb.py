"""Breadcrumb path composition."""

from __future__ import annotations

import logging

BREADCRUMB_DELIMITER = "⟡"
SEGMENT_JOINER = f" {BREADCRUMB_DELIMITER} "

logger = logging.getLogger(__name__)


def room_breadcrumb(section_label: str, component_label: str) -> str:
    """Return the room-layer path `SECTION ⟡ COMPONENT`, upper-cased."""
    return f"{section_label.upper()}{SEGMENT_JOINER}{component_label.upper()}"


def extract_title_fragment(title: str) -> str:
    """Return the subject part of a `CATEGORY ⟡ SUBJECT` modal title.

    Titles without the delimiter fall back to the whole (stripped) title.
    """
    parts = title.split(BREADCRUMB_DELIMITER)
    if len(parts) < 2:
        logger.warning("breadcrumb_malformed_title title=%r", title)
        return title.strip()
    return parts[1].strip()


def modal_breadcrumb(existing: str, modal_title: str) -> str:
    """Extend `existing` with the modal title's subject fragment."""
    return f"{existing}{SEGMENT_JOINER}{extract_title_fragment(modal_title)}"
