"""Report the host platform, architecture and runtime ABI as normalized tags."""

from hostenv.domain import CpuDescriptor, HostEnvironment
from hostenv.host import HostInfo, SystemHostInfo
from hostenv.humanize import humanize_arch, humanize_environment, humanize_platform, humanize_runtime
from hostenv.platform import (
    get_abi,
    get_arm_version,
    get_environment_tuple,
    get_platform_variant,
    normalize_arch,
    normalize_platform,
)

__version__ = "0.1.0"

environment_tuple = get_environment_tuple

__all__ = [
    "CpuDescriptor",
    "HostEnvironment",
    "HostInfo",
    "SystemHostInfo",
    "__version__",
    "environment_tuple",
    "get_abi",
    "get_arm_version",
    "get_environment_tuple",
    "get_platform_variant",
    "humanize_arch",
    "humanize_environment",
    "humanize_platform",
    "humanize_runtime",
    "normalize_arch",
    "normalize_platform",
]
