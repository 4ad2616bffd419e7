"""JSON canonicalisation, swap hashes and hex helpers."""

from __future__ import annotations

import binascii
import hashlib
import json

from Crypto.Hash import keccak

_RANDOM_NUMBER_LENGTH = 32
_UINT64_MASK = (1 << 64) - 1

_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _dump_json(value, sort_keys: bool = False) -> bytes:
    """Serialise compactly, escaping HTML-sensitive characters."""
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=sort_keys)
    return text.translate(_ESCAPES).encode("utf-8")


def sort_json(raw: bytes | str) -> bytes:
    """Return the JSON with all object keys sorted and whitespace removed."""
    return _dump_json(json.loads(raw), sort_keys=True)


def calculate_random_hash(random_number: bytes, timestamp: int) -> bytes:
    """Hash a 32-byte random number together with a big-endian timestamp."""
    padded = bytes(random_number[:_RANDOM_NUMBER_LENGTH]).ljust(_RANDOM_NUMBER_LENGTH, b"\0")
    data = padded + (timestamp & _UINT64_MASK).to_bytes(8, "big")
    return hashlib.sha256(data).digest()


def calculate_swap_id(random_number_hash: bytes, sender: bytes, sender_other_chain: str) -> bytes:
    """Derive the swap id from the random number hash and the senders."""
    data = bytes(random_number_hash) + bytes(sender) + sender_other_chain.lower().encode("utf-8")
    return hashlib.sha256(data).digest()


def hex_address(data: bytes) -> str:
    """Return the mixed-case checksummed hex form of an address."""
    if not data:
        return ""
    if len(data) > 32:
        raise ValueError("address is longer than 32 bytes")
    plain = bytes(data).hex()
    digest = keccak.new(digest_bits=256, data=plain.encode("ascii")).digest()
    nibbles = (nibble for byte in digest for nibble in (byte >> 4, byte & 0xF))
    return "0x" + "".join(
        char.upper() if char > "9" and nibble > 7 else char for char, nibble in zip(plain, nibbles)
    )


def hex_encode(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def hex_decode(text: str) -> bytes:
    """Decode a hex string carrying a 0x prefix."""
    if not has_0x_prefix(text):
        raise ValueError("hex string must have 0x prefix")
    return binascii.unhexlify(text[2:])


def has_0x_prefix(text: str) -> bool:
    return len(text) >= 2 and text[0] == "0" and text[1] in "xX"