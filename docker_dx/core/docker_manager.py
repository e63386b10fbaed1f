"""
Docker Manager for docker-dx.

This module wraps the Docker SDK's low-level API with the handful of list and
inspect queries the listings need, and turns SDK failures into QueryError.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import docker
import requests
from docker.errors import DockerException, NotFound

from docker_dx.config import DEFAULT_DOCKER_HOST
from docker_dx.core.errors import QueryError
from docker_dx.models.summaries import (
    ContainerSummary,
    ImageSummary,
    VolumeSummary,
    parse_timestamp,
)


logger = logging.getLogger(__name__)

QUERY_ERRORS = (DockerException, requests.exceptions.RequestException)


class DockerManager:
    """
    Runs synchronous queries against one Docker daemon.

    Every query is blocking and sequential. Failures raise QueryError; the
    ``find_*`` probes return None when the daemon reports the object missing.
    """
    def __init__(self, base_url: str = DEFAULT_DOCKER_HOST, client: Any = None):
        self.base_url = base_url
        self.client = client or self._connect()

    def _connect(self) -> docker.DockerClient:
        logger.debug(f"Connecting to {self.base_url}")
        try:
            return docker.DockerClient(base_url=self.base_url)
        except QUERY_ERRORS as e:
            raise QueryError("NewClient", e) from e

    def _query(self, call: str, func: Callable, *args, **kwargs):
        logger.debug(f"{call} {args} {kwargs}")
        try:
            return func(*args, **kwargs)
        except QUERY_ERRORS as e:
            raise QueryError(call, e) from e

    def list_containers(self, all: bool = False) -> List[Dict]:
        """List containers, including stopped ones when ``all`` is set."""
        return self._query("ListContainers", self.client.api.containers, all=all)

    def inspect_container(self, container_id: str) -> Dict:
        return self._query("InspectContainer", self.client.api.inspect_container, container_id)

    def list_images(self, all: bool = False) -> List[Dict]:
        """List images, including intermediate layers when ``all`` is set."""
        return self._query("ListImages", self.client.api.images, all=all)

    def inspect_image(self, image_id: str) -> Dict:
        return self._query("InspectImage", self.client.api.inspect_image, image_id)

    def list_volumes(self) -> List[Dict]:
        response = self._query("ListVolumes", self.client.api.volumes)
        return (response or {}).get("Volumes") or []

    def find_container(self, ref: str) -> Optional[Dict]:
        """Inspect a container by ID, ID prefix or name; None if there is none."""
        try:
            return self.client.api.inspect_container(ref)
        except NotFound:
            logger.debug(f"No container matching {ref}")
            return None
        except QUERY_ERRORS as e:
            raise QueryError("InspectContainer", e) from e

    def find_image(self, ref: str) -> Optional[Dict]:
        """Inspect an image by ID, ID prefix or reference; None if there is none."""
        try:
            return self.client.api.inspect_image(ref)
        except NotFound:
            logger.debug(f"No image matching {ref}")
            return None
        except QUERY_ERRORS as e:
            raise QueryError("InspectImage", e) from e

    def container_summaries(self, all: bool = False) -> List[ContainerSummary]:
        """
        List containers and inspect each one.

        Args:
            all: Include containers that are not running

        Returns:
            List[ContainerSummary]: One record per container, in listing order
        """
        summaries = []
        for listed in self.list_containers(all=all):
            inspected = self.inspect_container(listed["Id"])
            summaries.append(ContainerSummary.from_api(listed, inspected))
        return summaries

    def image_summaries(self, all: bool = False) -> List[ImageSummary]:
        return [ImageSummary.from_api(image) for image in self.list_images(all=all)]

    def volume_summaries(self) -> List[VolumeSummary]:
        return [VolumeSummary.from_api(volume) for volume in self.list_volumes()]

    def image_created(self, image_id: str) -> Optional[datetime]:
        """
        Creation time of an image, used for the container image-age column.

        A failed lookup is logged and gives None so the listing can go on.
        """
        try:
            image = self.inspect_image(image_id)
        except QueryError as e:
            logger.warning(f"Failed to look up image age: {e}")
            return None
        return parse_timestamp(image.get("Created"))
