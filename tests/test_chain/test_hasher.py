"""Tests for the DJB2 checksum (access_ledger/chain/hasher.py)."""

import pytest

from access_ledger.chain.hasher import digest, digest_text


@pytest.mark.unit
class TestDigest:
    """Known values and basic properties of digest()."""

    def test_empty_input_is_seed(self):
        assert digest(b"") == "5381"

    def test_single_byte(self):
        # 5381 * 33 + ord("a")
        assert digest(b"a") == "177670"

    def test_two_bytes(self):
        # 177670 * 33 + ord("b")
        assert digest(b"ab") == "5863208"

    def test_is_deterministic(self):
        payload = b"genesis1767225600"
        assert digest(payload) == digest(payload)

    def test_different_inputs_differ(self):
        assert digest(b"owner-a") != digest(b"owner-b")

    def test_wraps_at_64_bits(self):
        """Long inputs stay inside the unsigned 64-bit range."""
        value = int(digest(b"x" * 10_000))
        assert 0 <= value < 2**64

    def test_output_is_decimal_text(self):
        assert digest(b"anything").isdigit()


@pytest.mark.unit
def test_digest_text_encodes_utf8():
    assert digest_text("héllo") == digest("héllo".encode("utf-8"))
