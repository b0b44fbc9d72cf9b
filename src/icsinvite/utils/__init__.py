"""Utility helpers for the calendar invite application."""
