"""
Test Configuration
==================

Pytest fixtures and test configuration for binkit.
"""

import pytest


@pytest.fixture
def buffer_a():
    """Provide the first of two reference buffers for checksum tests."""
    return bytes([
        0x08, 0xC6, 0x9C, 0x1C, 0xF0, 0xEF, 0xE1, 0xD7,
        0xE1, 0x0B, 0xF2, 0xF6, 0xC5, 0x7F, 0xD0,
    ])


@pytest.fixture
def buffer_b():
    """Provide the second reference buffer for checksum tests."""
    return bytes([
        0x90, 0x9F, 0x38, 0x8C, 0xCC, 0x69, 0x48, 0x61,
        0x47, 0xB3, 0xD0, 0xF2, 0x22, 0x3A, 0x00,
    ])


@pytest.fixture
def pangram():
    """Provide the classic pangram as bytes."""
    return b"The quick brown fox jumps over the lazy dog"


@pytest.fixture
def hello_frame():
    """Provide an unmasked, final text frame carrying "Hello"."""
    return bytes([0x81, 0x05, 0x48, 0x65, 0x6C, 0x6C, 0x6F])


@pytest.fixture
def masked_hello_frame():
    """Provide a masked, final text frame carrying "Hello"."""
    return bytes([0x81, 0x85, 0x37, 0xFA, 0x21, 0x3D, 0x7F, 0x9F, 0x4D, 0x51, 0x58])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config loading from the caller's environment and cwd."""
    for name in (
        "BINKIT_CONFIG",
        "BINKIT_UNICODE_ERRORS",
        "BINKIT_UNICODE_ENDIANNESS",
        "BINKIT_WS_UNMASK",
        "BINKIT_LOG_LEVEL",
        "BINKIT_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
