class TokenizationError(Exception):
    """
    The tokenizer itself never raises on malformed input, it emits a final
    token of kind TokenKind.ERROR covering the rest of the input. Strict
    consumers of the token stream (see raise_on_error) raise
    TokenizationError when they encounter such a token.
    """

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class WrongFileModeError(Exception):
    """
    Thrown when an xml file is given as a stream opened in text mode, the
    tokenizer only operates on bytes.
    """

    pass
