"""Host information providers backing the environment probe."""

from __future__ import annotations

import platform
import sys
from pathlib import Path
from typing import Protocol

from py_app_dev.core.logging import logger

from hostenv.domain import CpuDescriptor

CPUINFO_PATH = Path("/proc/cpuinfo")

# Versioned sys.platform values (e.g. "freebsd14") reported by their family name.
_OS_FAMILIES: tuple[str, ...] = ("freebsd", "openbsd", "netbsd", "sunos", "aix")

_ARCH_MAP: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "i386": "ia32",
    "i486": "ia32",
    "i586": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "aarch64": "arm64",
    "arm64": "arm64",
    "arm": "arm",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "ppc64": "ppc64",
    "ppc64le": "ppc64",
}


class HostInfo(Protocol):
    """Source of the raw host values the probe normalizes."""

    def platform_id(self) -> str: ...

    def arch_id(self) -> str: ...

    def cpus(self) -> list[CpuDescriptor]: ...

    def abi_version(self) -> str: ...

    def read_executable(self) -> bytes: ...


def normalize_os_family(raw_os: str) -> str:
    """Fold a versioned ``sys.platform`` value into its OS family name."""
    for family in _OS_FAMILIES:
        if raw_os.startswith(family):
            return family
    return raw_os


def normalize_machine(raw_machine: str) -> str:
    """Map a ``platform.machine()`` value to an architecture tag."""
    machine = raw_machine.lower()
    return _ARCH_MAP.get(machine, machine)


def parse_cpuinfo(text: str) -> list[CpuDescriptor]:
    """
    Parse ``/proc/cpuinfo`` content into one descriptor per core.

    Cores are delimited by ``processor`` lines. The model comes from
    ``model name``; legacy ARM kernels print a single ``Processor`` line
    instead, which then applies to every core without its own model.
    """
    models: list[str | None] = []
    shared_model = ""
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key == "processor":
            models.append(None)
        elif key == "model name" and models:
            models[-1] = value
        elif key == "Processor":
            shared_model = value
    if not models and shared_model:
        models.append(None)
    return [CpuDescriptor(model=model or shared_model) for model in models]


class SystemHostInfo:
    """Host info read live from the running interpreter and operating system."""

    def __init__(self, cpuinfo_path: Path = CPUINFO_PATH) -> None:
        self.cpuinfo_path = cpuinfo_path

    def platform_id(self) -> str:
        return normalize_os_family(sys.platform)

    def arch_id(self) -> str:
        return normalize_machine(platform.machine())

    def cpus(self) -> list[CpuDescriptor]:
        try:
            return parse_cpuinfo(self.cpuinfo_path.read_text(encoding="utf-8", errors="replace"))
        except OSError as e:
            logger.debug(f"Cannot read {self.cpuinfo_path}: {e}")
        processor = platform.processor()
        return [CpuDescriptor(model=processor)] if processor else []

    def abi_version(self) -> str:
        return str(sys.api_version)

    def read_executable(self) -> bytes:
        if not sys.executable:
            raise FileNotFoundError("Interpreter executable path is unknown.")
        return Path(sys.executable).read_bytes()
