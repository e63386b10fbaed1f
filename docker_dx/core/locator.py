"""
Object lookup for the examine command.
"""

import logging
from typing import Iterable

from docker_dx.core.docker_manager import DockerManager
from docker_dx.core.errors import AmbiguousMatchError, NotFoundError
from docker_dx.models.enums import ObjectKind
from docker_dx.models.found import FoundObject


logger = logging.getLogger(__name__)

ALL_KINDS = tuple(ObjectKind)


def locate(manager: DockerManager, arg: str, kinds: Iterable[ObjectKind] = ALL_KINDS) -> FoundObject:
    """
    Find the object an ID, name or prefix refers to.

    Kinds are probed in a fixed order: containers (ID or name), images (ID),
    then volumes whose name starts with ``arg``. The first hit wins.

    Args:
        manager: Docker manager to query
        arg: ID, name or prefix to look up
        kinds: Kinds to probe; the probe order stays fixed

    Returns:
        FoundObject: The matched record

    Raises:
        AmbiguousMatchError: Several volumes start with ``arg``
        NotFoundError: Nothing matched
        QueryError: A query failed for another reason than a missing object
    """
    kinds = set(kinds)

    if ObjectKind.CONTAINER in kinds:
        container = manager.find_container(arg)
        if container is not None:
            return FoundObject(ObjectKind.CONTAINER, container.get("Id", arg), container)

    if ObjectKind.IMAGE in kinds:
        image = manager.find_image(arg)
        if image is not None:
            return FoundObject(ObjectKind.IMAGE, image.get("Id", arg), image)

    if ObjectKind.VOLUME in kinds:
        matches = [v for v in manager.list_volumes() if v.get("Name", "").startswith(arg)]
        if len(matches) > 1:
            raise AmbiguousMatchError(arg, [v["Name"] for v in matches])
        if matches:
            return FoundObject(ObjectKind.VOLUME, matches[0]["Name"], matches[0])

    logger.debug(f"Nothing matched {arg!r} among {sorted(k.value for k in kinds)}")
    raise NotFoundError(arg)
