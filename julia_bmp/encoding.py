import numpy as np


def base64_digit(v: int) -> str:
    """Symbol for the low 6 bits of v."""
    v &= 0x3F
    if v < 26:
        return chr(ord("A") + v)
    if v < 52:
        return chr(ord("a") + v - 26)
    if v < 62:
        return chr(ord("0") + v - 52)
    if v < 63:
        return "+"
    return "/"


BASE64_ALPHABET = "".join(base64_digit(v) for v in range(64))
PAD = "="

_ALPHABET_CODES = np.frombuffer(BASE64_ALPHABET.encode("ascii"), dtype=np.uint8)


def to_base64(data) -> str:
    """
    Encode bytes as base64 text with '=' padding.

    The input is zero-padded to a multiple of 3; each 3-byte group forms a
    24-bit big-endian value that is split into four 6-bit symbols. The
    symbols produced only by padding bytes are then replaced with '='.
    """
    raw = np.frombuffer(memoryview(data), dtype=np.uint8)
    n = raw.size
    if n == 0:
        return ""

    n_pad = -n % 3
    groups = np.concatenate([raw, np.zeros(n_pad, dtype=np.uint8)]).reshape(-1, 3)
    groups = groups.astype(np.uint32)
    value = (groups[:, 0] << 16) | (groups[:, 1] << 8) | groups[:, 2]

    digits = np.stack(
        [(value >> 18) & 0x3F, (value >> 12) & 0x3F, (value >> 6) & 0x3F, value & 0x3F],
        axis=-1,
    ).reshape(-1)
    text = _ALPHABET_CODES[digits].tobytes().decode("ascii")

    if n_pad:
        text = text[:-n_pad] + PAD * n_pad
    return text
