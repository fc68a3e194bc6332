"""Employee record."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """A single employee row.

    ``id`` is ``None`` until the record has been saved; the repository
    assigns it on insert and it never changes afterwards.
    """

    first_name: str
    last_name: str
    email: str
    id: Optional[int] = None
