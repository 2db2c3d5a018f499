"""Shared pytest fixtures for hostenv tests."""

from __future__ import annotations

import pytest

from tests.helpers import FakeHost


@pytest.fixture
def fake_host() -> FakeHost:
    """Provide a glibc Linux x64 host."""
    return FakeHost()


@pytest.fixture
def musl_host() -> FakeHost:
    """Provide a musl Linux x64 host."""
    return FakeHost(executable=b"\x7fELF\x00/lib/ld-musl-x86_64.so.1\x00libc.musl-x86_64.so.1\x00")


@pytest.fixture
def arm_host() -> FakeHost:
    """Provide a Raspberry Pi style ARMv7 host."""
    return FakeHost(arch="arm", cpu_models=["ARMv7 Processor rev 5 (v7l)"] * 4)
