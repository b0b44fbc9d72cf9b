"""
Models for the calendar invite application.
"""

from icsinvite.models.participant import Participant
from icsinvite.models.event import EventRecord

__all__ = ['EventRecord', 'Participant']
