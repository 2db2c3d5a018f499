from hostenv.domain.models import CpuDescriptor, HostEnvironment

__all__ = [
    "CpuDescriptor",
    "HostEnvironment",
]
