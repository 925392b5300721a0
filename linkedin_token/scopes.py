"""Conversion of LinkedIn scopes to profile query fields"""

from typing import Collection, List, Optional

from .constants import SCOPE_PROFILE_FIELDS


def scope_to_profile_fields(scope, profile_fields: Optional[Collection[str]] = None) -> str:
    """Convert LinkedIn scopes to the comma-joined list of profile fields

    Scopes missing from SCOPE_PROFILE_FIELDS are skipped without complaint.
    Explicit profile fields come first, then the scope fields, with
    duplicates removed in first-seen order.

    Args:
        scope: Sequence of LinkedIn permission names. Anything that is not a
            list, tuple or set contributes no fields.
        profile_fields: Extra fields to request regardless of scope

    Returns:
        Field list ready to embed in the profile URL
    """
    fields: List[str] = []
    if isinstance(profile_fields, (list, tuple, set, frozenset)):
        fields.extend(profile_fields)

    if isinstance(scope, (list, tuple, set, frozenset)):
        for scope_name in scope:
            fields.extend(SCOPE_PROFILE_FIELDS.get(scope_name, ()))

    return ",".join(dict.fromkeys(fields))
