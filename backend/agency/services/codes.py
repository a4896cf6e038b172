"""Code generation for new shipping lines, port agents and service providers.

Formats:
  shipping line:     initials of the name, 3-4 chars        "Pacific Int Lines" -> PIL
  port agent:        {port_code}-{initials:3}               IDJKT-SAM
  service provider:  {TYPE:3}-{initials:3}                  TRU-BJL

Names too short to yield three characters are padded with ``X``, so an
empty name still produces ``XXX``.  A base code already present in
``existing_codes`` gets a numeric suffix (PIL1, PIL2, ...) until it is free.

``existing_codes`` is supplied by the caller (usually the codes currently
stored for that entity) and is never modified here.
"""

import enum
import logging
from typing import Iterable

from agency.schemas.enums import ProviderType

logger = logging.getLogger(__name__)

MIN_CODE_LENGTH = 3
PAD_CHAR = "X"
LINE_INITIALS_MAX = 4
PARTNER_INITIALS_MAX = 3
TYPE_PREFIX_LENGTH = 3


def _initials(name: str, limit: int) -> str:
    """First character of each word, upper-cased, at most ``limit`` chars."""
    return "".join(word[0].upper() for word in name.split())[:limit]


def _next_free(base: str, existing_codes: Iterable[str]) -> str:
    """Return ``base`` or the first ``base{n}`` (n = 1, 2, ...) not in use."""
    taken = set(existing_codes)
    code = base
    suffix = 1
    while code in taken:
        code = f"{base}{suffix}"
        suffix += 1

    if code != base:
        logger.debug("Code %s already in use, assigned %s", base, code)
    return code


def generate_shipping_line_code(
    line_name: str,
    existing_codes: Iterable[str] = (),
) -> str:
    """Generate a unique shipping line code from the line name.

    Args:
        line_name: Display name, e.g. "Pacific International Lines"
        existing_codes: Codes already taken

    Returns:
        A code of at least 3 characters not present in ``existing_codes``
    """
    words = line_name.split()
    base = _initials(line_name, LINE_INITIALS_MAX)

    # Single-word names: use the leading letters of the word instead
    if len(base) < MIN_CODE_LENGTH and words:
        base = words[0][:LINE_INITIALS_MAX].upper()

    base = base.ljust(MIN_CODE_LENGTH, PAD_CHAR)
    return _next_free(base, existing_codes)


def generate_agent_code(
    agent_name: str,
    port_code: str,
    existing_codes: Iterable[str] = (),
) -> str:
    """Generate a unique port agent code, e.g. ``IDJKT-SAM``."""
    agent_prefix = _initials(agent_name, PARTNER_INITIALS_MAX).ljust(
        PARTNER_INITIALS_MAX, PAD_CHAR
    )
    return _next_free(f"{port_code}-{agent_prefix}", existing_codes)


def generate_provider_code(
    provider_name: str,
    provider_type: ProviderType | str,
    existing_codes: Iterable[str] = (),
) -> str:
    """Generate a unique service provider code, e.g. ``TRU-BJL``."""
    type_token = (
        provider_type.value if isinstance(provider_type, enum.Enum) else provider_type
    )
    type_prefix = type_token[:TYPE_PREFIX_LENGTH].upper()
    name_prefix = _initials(provider_name, PARTNER_INITIALS_MAX).ljust(
        PARTNER_INITIALS_MAX, PAD_CHAR
    )
    return _next_free(f"{type_prefix}-{name_prefix}", existing_codes)
