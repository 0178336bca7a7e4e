"""Decide which named profile, if any, overrides are written under."""

from __future__ import annotations

from typing import Optional

from tomlkit import TOMLDocument

PROFILE_KEY = "profile"


def resolve_profile(doc: TOMLDocument, explicit_profile: Optional[str] = None) -> Optional[str]:
    """Return the explicit profile verbatim, else the document's top-level ``profile`` string.

    An explicit empty string is still a profile name. A ``profile`` key that
    is not a string is ignored.
    """
    if explicit_profile is not None:
        return explicit_profile
    active = doc.get(PROFILE_KEY)
    if isinstance(active, str):
        return active.unwrap()
    return None
