"""Reusable test helpers for faking host information."""

from __future__ import annotations

from dataclasses import dataclass, field

from hostenv.domain import CpuDescriptor


@dataclass
class FakeHost:
    """A host info provider serving literal fixture values."""

    platform: str = "linux"
    arch: str = "x64"
    abi: str = "48"
    executable: bytes | None = b"\x7fELF /lib/ld-linux-x86-64.so.2"
    cpu_models: list[str] = field(default_factory=lambda: ["Intel(R) Xeon(R) CPU @ 2.20GHz"])
    executable_reads: int = 0

    def platform_id(self) -> str:
        return self.platform

    def arch_id(self) -> str:
        return self.arch

    def cpus(self) -> list[CpuDescriptor]:
        return [CpuDescriptor(model=model) for model in self.cpu_models]

    def abi_version(self) -> str:
        return self.abi

    def read_executable(self) -> bytes:
        self.executable_reads += 1
        if self.executable is None:
            raise PermissionError("Permission denied: '/usr/bin/python3'")
        return self.executable
