from _xtoken.tokenizer.errors import TokenizationError


def raise_on_error(tokens, buffer):
    """
    Combinator for token iterators.

    :param tokens: Any iterator of tokens, ie. a Tokenizer.
    :param buffer: The buffer the tokens were tokenized from.
    :returns: Iterator yielding the same tokens, but raising
        TokenizationError instead of yielding a token of kind
        TokenKind.ERROR.
    """
    for token in tokens:
        if token.is_error:
            preview = bytes(token.get_value(buffer)[:20])
            raise TokenizationError(
                f"Malformed or unterminated markup at offset {token.start}: "
                f"{preview!r}",
                token,
            )
        yield token


def with_values(tokens, buffer):
    """
    :returns: Iterator of (kind, value) pairs for the given tokens, where
        value is a copy of the bytes of the token.
    """
    for token in tokens:
        yield token.kind, bytes(token.get_value(buffer))
