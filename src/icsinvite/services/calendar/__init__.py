"""
Calendar rendering, writing and delivery services.
"""
