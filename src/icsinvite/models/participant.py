"""
Participant model for calendar invites.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Participant:
    """Organiser or attendee, keyed by email address."""
    email: str
    name: str = ''

    @classmethod
    def create(cls, email: str, name: str = '') -> "Participant":
        """Create a participant with surrounding whitespace trimmed."""
        return cls(email=(email or '').strip(), name=(name or '').strip())

    @classmethod
    def from_value(cls, value: Any) -> "Participant":
        """
        Create participant from a loosely typed value.
        
        Accepts a Participant, a mapping with ``email``/``name`` keys,
        a ``(name, email)`` pair or a bare email string.
        
        Raises:
            ValueError: If the value has none of those shapes
        """
        if isinstance(value, Participant):
            return cls.create(value.email, value.name)
        if isinstance(value, Mapping):
            return cls.create(str(value.get('email', '')), str(value.get('name', '')))
        if isinstance(value, str):
            return cls.create(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            name, email = value
            return cls.create(str(email), str(name))
        raise ValueError(f"Cannot build participant from {type(value).__name__}")

    def to_dict(self) -> dict[str, str]:
        """Convert participant to dictionary."""
        return {'name': self.name, 'email': self.email}
