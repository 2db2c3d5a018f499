"""Platform, architecture and ABI detection for hostenv."""

from __future__ import annotations

import re

from py_app_dev.core.logging import logger

from hostenv.domain import CpuDescriptor
from hostenv.host import HostInfo, SystemHostInfo

MUSL_LIBRARY = b"libc.musl-x86_64.so.1"

_ARM_VERSION_PATTERN = re.compile(r"\(([^()]+)\)\s*$")


def _host_or_default(host: HostInfo | None) -> HostInfo:
    return host if host is not None else SystemHostInfo()


def get_platform_variant(platform: str, *, host: HostInfo | None = None) -> str:
    """
    Return the C library variant of *platform*: ``"musl"`` or ``""``.

    Only Linux is inspected. The running executable is scanned for the musl
    dynamic loader name; a failed read counts as "not detected".
    """
    if platform != "linux":
        return ""
    host = _host_or_default(host)
    try:
        contents = host.read_executable()
    except OSError as e:
        logger.debug(f"musl detection skipped, cannot read executable: {e}")
        return ""
    if MUSL_LIBRARY in contents:
        return "musl"
    return ""


def normalize_platform(platform: str | None = None, *, host: HostInfo | None = None) -> str:
    """Return the platform tag, e.g. ``darwin`` or ``linux_musl``."""
    host = _host_or_default(host)
    if platform is None:
        platform = host.platform_id()
    variant = get_platform_variant(platform, host=host)
    return "_".join(filter(None, [platform, variant]))


def get_arm_version(cpus: list[CpuDescriptor] | None = None, *, host: HostInfo | None = None) -> str:
    """
    Extract the ARM sub-version from the first CPU model string.

    ``ARMv6-compatible processor rev 7 (v6l)`` yields ``v6l``.

    Raises:
        ValueError: If there is no CPU descriptor or its model has no trailing parenthetical.

    """
    if cpus is None:
        cpus = _host_or_default(host).cpus()
    if not cpus:
        raise ValueError("Cannot determine ARM version: no CPU information available.")
    model = cpus[0].model
    match = _ARM_VERSION_PATTERN.search(model)
    if match is None:
        raise ValueError(f"Cannot determine ARM version from CPU model {model!r}.")
    return match.group(1)


def normalize_arch(
    arch: str | None = None,
    *,
    cpus: list[CpuDescriptor] | None = None,
    host: HostInfo | None = None,
) -> str:
    """Return the architecture tag; ``arm`` gets its sub-version appended (``armv7l``)."""
    host = _host_or_default(host)
    if arch is None:
        arch = host.arch_id()
    if arch == "arm":
        arch += get_arm_version(cpus, host=host)
    return arch


def get_abi(*, host: HostInfo | None = None) -> str:
    """Return the module binary-interface version of the running runtime."""
    return _host_or_default(host).abi_version()


def get_environment_tuple(*, host: HostInfo | None = None) -> tuple[str, str, str]:
    """Return the live ``(platform, arch, abi)`` tuple of the host."""
    host = _host_or_default(host)
    return normalize_platform(host=host), normalize_arch(host=host), get_abi(host=host)
