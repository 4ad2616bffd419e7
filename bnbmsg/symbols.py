"""Validation of token symbols."""

from __future__ import annotations

import re

from .base import (
    DOT_B_SUFFIX,
    MINI_TOKEN_SYMBOL_M_SUFFIX,
    MINI_TOKEN_SYMBOL_MAX_LEN,
    MINI_TOKEN_SYMBOL_MIN_LEN,
    MINI_TOKEN_SYMBOL_SUFFIX_LEN,
    MINI_TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN,
    NATIVE_TOKEN,
    NATIVE_TOKEN_DOT_B_SUFFIXED,
    TOKEN_SYMBOL_MAX_LEN,
    TOKEN_SYMBOL_MIN_LEN,
    TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN,
    ValidationError,
)

_ALNUM = re.compile(r"[A-Za-z0-9]+")
_TX_HASH = re.compile(f"[0-9A-F]{{{TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN}}}")
_MINI_TX_HASH = re.compile(f"[0-9A-F]{{{MINI_TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN}}}M")
_NATIVE = (NATIVE_TOKEN, NATIVE_TOKEN_DOT_B_SUFFIXED)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _is_alpha_num(text: str) -> bool:
    return _ALNUM.fullmatch(text) is not None


def split_suffixed_token_symbol(symbol: str) -> tuple[str, str]:
    """Split ``NAME-SUFFIX`` into its two parts; the native token needs no suffix."""
    if symbol in _NATIVE:
        return symbol, ""
    parts = symbol.split("-", 1)
    if len(parts) != 2:
        raise ValidationError("suffixed token symbol must contain a hyphen ('-')")
    if "-" in parts[1]:
        raise ValidationError("suffixed token symbol must contain just one hyphen ('-')")
    return parts[0], parts[1]


def validate_symbol(symbol: str) -> None:
    """Raise ValidationError unless the symbol is a valid suffixed token symbol."""
    if not symbol:
        raise ValidationError("suffixed token symbol cannot be empty")
    if symbol in _NATIVE:
        return

    symbol_part, tx_hash_part = split_suffixed_token_symbol(symbol)

    if symbol_part in _NATIVE:
        raise ValidationError("native token symbol should not be suffixed with tx hash")

    symbol_part = symbol_part.removesuffix(DOT_B_SUFFIX)

    if _byte_len(symbol_part) < TOKEN_SYMBOL_MIN_LEN:
        raise ValidationError(f"token symbol part is too short, got {_byte_len(symbol_part)} chars")
    if _byte_len(symbol_part) > TOKEN_SYMBOL_MAX_LEN:
        raise ValidationError(f"token symbol part is too long, got {_byte_len(symbol_part)} chars")
    if not _is_alpha_num(symbol_part):
        raise ValidationError("token symbol part should be alphanumeric")

    if _byte_len(tx_hash_part) != TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN:
        raise ValidationError(
            f"token symbol tx hash suffix must be {TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN} chars in length, "
            f"got {_byte_len(tx_hash_part)}"
        )
    if not _TX_HASH.search(tx_hash_part):
        raise ValidationError(
            f"token symbol tx hash suffix must be hex with a length of {TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN}"
        )


def validate_mini_token_symbol(symbol: str) -> None:
    """Raise ValidationError unless the symbol is a valid mini-token symbol."""
    if not symbol:
        raise ValidationError("suffixed token symbol cannot be empty")

    symbol_part, suffix_part = split_suffixed_token_symbol(symbol)

    if _byte_len(symbol_part) < MINI_TOKEN_SYMBOL_MIN_LEN:
        raise ValidationError(f"mini-token symbol part is too short, got {_byte_len(symbol_part)} chars")
    if _byte_len(symbol_part) > MINI_TOKEN_SYMBOL_MAX_LEN:
        raise ValidationError(f"mini-token symbol part is too long, got {_byte_len(symbol_part)} chars")
    if not _is_alpha_num(symbol_part):
        raise ValidationError("mini-token symbol part should be alphanumeric")

    if _byte_len(suffix_part) != MINI_TOKEN_SYMBOL_SUFFIX_LEN:
        raise ValidationError(
            f"mini-token symbol suffix must be {MINI_TOKEN_SYMBOL_SUFFIX_LEN} chars in length, "
            f"got {_byte_len(suffix_part)}"
        )
    if not suffix_part.endswith(MINI_TOKEN_SYMBOL_M_SUFFIX):
        raise ValidationError("mini-token symbol suffix must end with M")
    if not _MINI_TX_HASH.search(suffix_part):
        raise ValidationError(
            "mini-token symbol tx hash suffix must be hex with a length of "
            f"{MINI_TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN}"
        )


def is_valid_mini_token_symbol(symbol: str) -> bool:
    try:
        validate_mini_token_symbol(symbol)
    except ValidationError:
        return False
    return True