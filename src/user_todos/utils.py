from __future__ import annotations

import re
from typing import Optional

# Canonical 8-4-4-4-12 form, RFC 4122 versions 1-8, plus the nil and max UUIDs.
_UUID_RE = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


# PUBLIC_INTERFACE
def is_valid_uuid(value: Optional[str]) -> bool:
    """
    Return True if value is a UUID string in canonical hyphenated form.

    Braced, URN-prefixed or hyphen-less spellings accepted by uuid.UUID are
    rejected so that ids compare by plain string equality.
    """
    if not isinstance(value, str):
        return False
    return _UUID_RE.fullmatch(value) is not None
