"""
Read-only records and render settings for docker-dx.
"""
