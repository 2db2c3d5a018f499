"""Human readable labels for environment tags, used in diagnostics."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Sequence

from hostenv.host import HostInfo
from hostenv.platform import get_abi, get_environment_tuple, normalize_arch, normalize_platform

_PLATFORM_LABELS: dict[str, str] = {
    "darwin": "MacOS",
    "freebsd": "FreeBSD",
    "openbsd": "OpenBSD",
    "linux": "Linux",
    "linux_musl": "Linux/musl",
    "win32": "Windows",
}

_ARCH_LABELS: dict[str, str] = {
    "armv6l": "ARM v6l",
    "armv7l": "ARM v7l",
    "ia32": "32-bit",
    "x86": "32-bit",
    "x64": "64-bit",
    "ppc64": "PowerPC 64-bit",
}

_RUNTIME_LABELS: dict[int, str] = {
    11: "Node 0.10.x",
    14: "Node 0.12.x",
    42: "io.js 1.x",
    43: "io.js 1.1.x",
    44: "io.js 2.x",
    45: "io.js 3.x",
    46: "Node.js 4.x",
    47: "Node.js 5.x",
    48: "Node.js 6.x",
    51: "Node.js 7.x",
}

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_abi(abi: str | float) -> int | None:
    """Parse the leading base 10 integer of *abi*, or None when there is none."""
    if isinstance(abi, (int, float)):
        return int(abi) if math.isfinite(abi) else None
    match = _LEADING_INT.match(abi)
    return int(match.group(1)) if match else None


def humanize_platform(platform: str | None = None, *, host: HostInfo | None = None) -> str | None:
    """Return the display name of a platform tag, or None if unknown."""
    if platform is None:
        platform = normalize_platform(host=host)
    return _PLATFORM_LABELS.get(platform)


def humanize_arch(arch: str | None = None, *, host: HostInfo | None = None) -> str | None:
    """Return the display name of an architecture tag, or None if unknown."""
    if arch is None:
        arch = normalize_arch(host=host)
    return _ARCH_LABELS.get(arch)


def humanize_runtime(abi: str | float | None = None, *, host: HostInfo | None = None) -> str | None:
    """
    Return the runtime release matching an ABI tag, or None if unknown.

    Strings are parsed from their leading ASCII digits and numbers are truncated, so
    ``"48"``, ``48`` and ``48.0`` all map to ``Node.js 6.x``.
    """
    if abi is None:
        abi = get_abi(host=host)
    number = _parse_abi(abi)
    if number is None:
        return None
    return _RUNTIME_LABELS.get(number)


def humanize_environment(parts: Sequence[str] | None = None, *, host: HostInfo | None = None) -> str:
    """
    Describe a ``(platform, arch, abi)`` tuple in one sentence for error reports.

    Defaults to the live host tuple. Unknown tags are reported as unsupported
    instead of failing, e.g. ``Linux Unsupported architecture (mips) with Node.js 6.x``.
    """
    if parts is None:
        parts = get_environment_tuple(host=host)
    if len(parts) != 3:
        return f"Unknown environment ({json.dumps(list(parts), separators=(',', ':'), default=str, ensure_ascii=False)})"

    platform_tag, arch_tag, abi_tag = parts
    platform = humanize_platform(platform_tag)
    arch = humanize_arch(arch_tag)
    runtime = humanize_runtime(abi_tag)

    if platform is None:
        platform = f"Unsupported platform ({platform_tag})"
    if arch is None:
        arch = f"Unsupported architecture ({arch_tag})"
    if runtime is None:
        runtime = f"Unsupported runtime ({abi_tag})"

    return f"{platform} {arch} with {runtime}"
