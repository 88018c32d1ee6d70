import uuid
from typing import Optional

from django.conf import settings


def make_short_id(length: Optional[int] = None) -> str:
    """Short random id used as primary key for overlay rows."""
    length = length or getattr(settings, 'SCHEMATIC_SHORT_ID_LENGTH', 10)
    return uuid.uuid4().hex[:length]
