"""
Formatting and terminal helpers for docker-dx.
"""
