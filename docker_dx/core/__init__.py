"""
Runtime queries and object lookup for docker-dx.
"""
