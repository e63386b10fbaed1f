"""
Result model for examine lookups.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from docker_dx.models.enums import DumpFormat, ObjectKind


@dataclass(frozen=True)
class FoundObject:
    """
    A container, image or volume record matched by examine.

    ``record`` is the raw API document; ``identifier`` is the full ID, or the
    name for volumes.
    """
    kind: ObjectKind
    identifier: str
    record: Dict[str, Any]

    def dump(self, fmt: DumpFormat = DumpFormat.JSON) -> str:
        """Serialize the record to indented structured text."""
        if fmt == DumpFormat.YAML:
            return yaml.safe_dump(self.record, default_flow_style=False, sort_keys=False, allow_unicode=True)
        return json.dumps(self.record, indent=2, ensure_ascii=False, default=str) + "\n"
