"""
Services for the calendar invite application.
"""
