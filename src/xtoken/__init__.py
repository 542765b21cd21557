import xtoken.version
from _xtoken.reading import lazy_read, read
from _xtoken.tokenizer import (
    Token,
    TokenizationError,
    TokenKind,
    Tokenizer,
    WrongFileModeError,
    raise_on_error,
    tokenize,
)

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = xtoken.version.version

__all__ = [
    "Token",
    "TokenKind",
    "TokenizationError",
    "Tokenizer",
    "WrongFileModeError",
    "lazy_read",
    "raise_on_error",
    "read",
    "tokenize",
]
