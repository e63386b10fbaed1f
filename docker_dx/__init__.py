"""
docker-dx: compact listings of Docker containers, images and volumes.
"""

__version__ = "0.3.0"
