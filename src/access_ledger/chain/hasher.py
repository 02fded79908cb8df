"""DJB2 checksum used to link blocks together.

The digest is a 64-bit DJB2 accumulator (``h = h * 33 + byte``, seeded with
``5381``) rendered as an unsigned decimal string.  It is stable across runs
and platforms, which is all chain linkage needs.  It is **not** a
cryptographic hash: collisions and preimages are easy to construct, and no
caller may rely on it for tamper resistance.
"""

from __future__ import annotations

_DJB2_SEED = 5381

# The accumulator wraps like an unsigned 64-bit integer.
_MASK_64 = (1 << 64) - 1


def digest(data: bytes) -> str:
    """Return the decimal DJB2 digest of ``data``.

    Args:
        data: Arbitrary byte content.  The empty string is valid and yields
              the seed value ``"5381"``.

    Returns:
        The 64-bit accumulator as a base-10 string.

    Example::

        >>> digest(b"a")
        '177670'
    """
    h = _DJB2_SEED
    for byte in data:
        h = ((h << 5) + h + byte) & _MASK_64
    return str(h)


def digest_text(text: str) -> str:
    """Digest ``text`` after encoding it as UTF-8."""
    return digest(text.encode("utf-8"))
