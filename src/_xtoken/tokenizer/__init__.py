"""
In this module, a tokenizer is an iterator that takes a buffer containing an
xml document and generates tokens. A token is a kind and the start and end
offsets of the token in the buffer, so no bytes are copied while
tokenizing.

Tokenization is lazy: each call to next() scans only as far as needed to
find the end of the next token. The tokens partition the buffer, every byte
belongs to exactly one token, and there is no backtracking once a token has
been generated.

Errors are not raised, instead unterminated markup (ie. b"<a" without a
closing b">") results in a final token of kind TokenKind.ERROR containing
the rest of the buffer. See combinators.raise_on_error for turning these
into exceptions.

Internal DTD subsets, ie. b"<!DOCTYPE x [ <!ENTITY y 'z'> ]>", are
tokenized as a declaration ending with b"[", the declarations in the subset,
and a declaration end token for the closing b"]>".
"""

from .combinators import raise_on_error, with_values
from .errors import TokenizationError, WrongFileModeError
from .token import Token
from .token_kind import TokenKind
from .xml_tokenizer import Tokenizer, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "TokenizationError",
    "Tokenizer",
    "WrongFileModeError",
    "raise_on_error",
    "tokenize",
    "with_values",
]
