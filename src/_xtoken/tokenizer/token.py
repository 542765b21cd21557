from dataclasses import dataclass

from _xtoken.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in an xml document, covering the bytes buffer[start:end] of
    the buffer it was tokenized from. The token does not hold on to the
    buffer, so the buffer has to be kept around for as long as the value
    of the token is needed.
    """

    kind: TokenKind
    start: int
    end: int

    def __len__(self):
        return self.end - self.start

    @property
    def is_error(self):
        return self.kind == TokenKind.ERROR

    def get_value(self, buffer):
        """
        :returns: The bytes of the token, ie. b"&amp;" for an entity token.
            When given a memoryview the value is a memoryview into the same
            memory, no bytes are copied.
        """
        return buffer[self.start : self.end]
