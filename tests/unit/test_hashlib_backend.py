"""
Unit tests for the hashlib digest backend.
"""

import hashlib

import pytest

from hashgen.backends import XOF_ALGORITHMS, HashlibBackend
from hashgen.core.exceptions import DigestBackendError


class TestHashlibBackend:
    """Tests for HashlibBackend."""

    def test_available_algorithms_matches_hashlib(self):
        backend = HashlibBackend()
        assert backend.available_algorithms() == set(hashlib.algorithms_available)

    def test_common_algorithms_supported(self):
        backend = HashlibBackend()
        for name in ("md5", "sha1", "sha256", "sha512", "sha3_256", "blake2b"):
            assert backend.supports(name), name

    def test_hex_digest(self):
        backend = HashlibBackend()
        assert backend.digest("sha1", b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_raw_digest(self):
        backend = HashlibBackend()
        assert backend.digest("md5", b"", raw_output=True) == hashlib.md5(b"").digest()

    def test_empty_input(self):
        backend = HashlibBackend()
        assert backend.digest("md5", b"") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_variable_length_detection(self):
        backend = HashlibBackend()
        assert backend.is_variable_length("shake_128") is True
        assert backend.is_variable_length("shake_256") is True
        assert backend.is_variable_length("sha256") is False
        assert XOF_ALGORITHMS == {"shake_128", "shake_256"}

    def test_shake_digest_length(self):
        backend = HashlibBackend()
        assert backend.digest("shake_256", b"abc", length=10) == hashlib.shake_256(b"abc").hexdigest(10)

    def test_shake_without_length_fails(self):
        backend = HashlibBackend()
        with pytest.raises(DigestBackendError, match="requires an output length"):
            backend.digest("shake_128", b"abc")

    def test_unsupported_algorithm_wraps_error(self):
        backend = HashlibBackend()
        with pytest.raises(DigestBackendError) as exc_info:
            backend.digest("not-a-real-algorithm", b"abc")
        assert exc_info.value.context == {"algorithm": "not-a-real-algorithm"}
        assert isinstance(exc_info.value.__cause__, ValueError)
