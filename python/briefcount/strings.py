"""Shortcuts for pulling regex groups out of strings."""

import logging
import re
import secrets
from datetime import datetime

logger = logging.getLogger(__name__)

Pattern = str | re.Pattern[str]


def first_group_from_first_match(pattern: Pattern, text: str) -> str | None:
    """Group 1 of the first match of `pattern` in `text`, or None."""
    if (mo := re.search(pattern, text)) is None:
        logger.debug(f"No match for {pattern!r} in {text!r}")
        return None
    return mo.group(1)


def all_groups_from_first_match(pattern: Pattern, text: str) -> list[str]:
    """Every group of the first match, in order. Empty if nothing matches."""
    if (mo := re.search(pattern, text)) is None:
        logger.debug(f"No match for {pattern!r} in {text!r}")
        return []
    return list(mo.groups())


def first_group_from_all_matches(pattern: Pattern, text: str) -> list[str]:
    """Group 1 of each non-overlapping match, in order of occurrence."""
    return [mo.group(1) for mo in re.finditer(pattern, text)]


def generate_unique_id() -> str:
    """A filesystem safe id, e.g. `20261019-143027-5f3a9c1e2b7d4e60`."""
    # Timestamp first so that ids sort by creation time
    return f"{datetime.now():%Y%m%d-%H%M%S}-{secrets.token_hex(8)}"
