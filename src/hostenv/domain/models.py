"""Hostenv domain models for CPU descriptors and environment reports."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mashumaro.config import BaseConfig
from mashumaro.mixins.json import DataClassJSONMixin


@dataclass(frozen=True)
class CpuDescriptor:
    """A single CPU core as reported by the host."""

    #: Free-text model string, e.g. ``ARMv7 Processor rev 5 (v7l)``
    model: str


@dataclass
class HostEnvironment(DataClassJSONMixin):
    """Serializable report of a host environment tuple and its description."""

    class Config(BaseConfig):
        omit_none = True

    platform: str
    arch: str
    abi: str
    description: str | None = None

    @classmethod
    def from_tuple(cls, parts: Sequence[str], description: str | None = None) -> Self:
        """
        Build a report from a ``(platform, arch, abi)`` tuple.

        Raises:
            ValueError: If *parts* does not hold exactly three tags.

        """
        if len(parts) != 3:
            raise ValueError(f"Expected (platform, arch, abi), got {list(parts)!r}")
        platform, arch, abi = parts
        return cls(platform=platform, arch=arch, abi=abi, description=description)

    def as_tuple(self) -> tuple[str, str, str]:
        return self.platform, self.arch, self.abi

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
