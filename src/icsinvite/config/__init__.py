"""Configuration package for the calendar invite application."""

from icsinvite.config.settings import IcsSettings, load_settings

__all__ = ['IcsSettings', 'load_settings']
