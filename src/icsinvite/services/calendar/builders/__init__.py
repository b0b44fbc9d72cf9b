"""
Calendar builders package.
"""

from icsinvite.services.calendar.builders.ics_builder import IcsBuilder

__all__ = [
    'IcsBuilder'
]
