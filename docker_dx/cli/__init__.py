"""
CLI layer for docker-dx.
"""
