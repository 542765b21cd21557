import warnings

from _xtoken.tokenizer.byte_search import ByteScanner
from _xtoken.tokenizer.token import Token
from _xtoken.tokenizer.token_kind import TokenKind

LT = ord("<")
GT = ord(">")
AMP = ord("&")
SEMICOLON = ord(";")
QUESTION = ord("?")
BANG = ord("!")
SLASH = ord("/")
DASH = ord("-")
LSQB = ord("[")
RSQB = ord("]")


class Tokenizer:
    """
    The xml tokenizer is an iterator of tokens for a buffer containing an
    xml document. Each call to next() consumes the bytes of exactly one
    token, so that the tokens partition the buffer: concatenating the
    values of all tokens gives back the buffer.

    Tokenization only recognizes delimiters, ie. an element is anything
    from b"<" to the next b">", regardless of quoting. Malformed or
    unterminated markup results in one token of kind TokenKind.ERROR
    covering the rest of the buffer, after which the tokenizer is exhausted.

    >>> [t.kind.name for t in Tokenizer(b"<x>Hello World!</x>")]
    ['ELEMENT', 'SPAN', 'ELEMENT_END']

    """

    def __init__(self, buffer):
        """
        :param buffer: A bytes-like object containing the entire document.
            It has to be C-contiguous with one byte items, as tokens are
            offsets into the buffer.
        """
        if isinstance(buffer, str):
            raise TypeError("Tokenizer requires a bytes-like buffer, got str")
        with memoryview(buffer) as view:
            if not view.c_contiguous:
                raise TypeError("Tokenizer requires a C-contiguous buffer")
            if view.itemsize != 1:
                raise TypeError(
                    "Tokenizer requires a buffer of single bytes, "
                    f"got items of size {view.itemsize}"
                )
        self.buffer = buffer
        self._scanner = ByteScanner(buffer)
        self._end = len(self._scanner)
        self.position = 0
        # Depth of internal DTD subsets, ie. <!DOCTYPE x [ ... ]>. It is
        # never decremented, once inside a subset b"]" stays significant.
        self.depth = 0
        self._has_warned = False

    @property
    def exhausted(self):
        return self.position >= self._end

    @property
    def rest(self):
        """
        The part of the buffer which has not yet been tokenized.
        """
        return self.buffer[self.position : self._end]

    def __iter__(self):
        return self

    def __next__(self):
        start = self.position
        if start >= self._end:
            raise StopIteration
        if self.depth == 0:
            found = self._scanner.memchr2(LT, AMP, start)
        else:
            found = self._scanner.memchr3(LT, AMP, RSQB, start)

        if found is None:
            return self.take(TokenKind.SPAN, self._end)
        if found > start:
            return self.take(TokenKind.SPAN, found)

        marker = self._scanner[start]
        if marker == AMP:
            return self.tokenize_entity()
        elif marker == LT:
            return self.tokenize_structure()
        else:
            return self.tokenize_decl_end()

    def take(self, kind, end):
        """
        Consume the buffer up to end, and return the consumed part as a
        token of the given kind.
        """
        token = Token(kind, self.position, end)
        self.position = end
        return token

    def take_rest_as_error(self):
        return self.take(TokenKind.ERROR, self._end)

    def _take_through(self, kind, needle, start):
        """
        Consume the buffer through the next occurrence of needle at or
        after start.
        """
        found = self._scanner.memchr(needle, start)
        if found is None:
            return self.take_rest_as_error()
        return self.take(kind, found + 1)

    def _byte_at(self, offset):
        if offset < self._end:
            return self._scanner[offset]
        return None

    def tokenize_structure(self):
        """
        Tokenize markup starting with b"<".
        """
        follower = self._byte_at(self.position + 1)
        if follower is None:
            return self.take_rest_as_error()
        elif follower == BANG:
            return self.tokenize_builtin()
        elif follower == QUESTION:
            return self.tokenize_processing_instruction()
        elif follower == SLASH:
            return self.tokenize_element_end()
        else:
            return self.tokenize_element()

    def tokenize_processing_instruction(self):
        """
        Tokenize b"<? ... ?>".
        """
        search_from = self.position + 2
        while True:
            found = self._scanner.memchr(QUESTION, search_from)
            if found is None:
                return self.take_rest_as_error()
            follower = self._byte_at(found + 1)
            if follower is None:
                return self.take_rest_as_error()
            if follower == GT:
                return self.take(TokenKind.PI, found + 2)
            search_from = found + 1

    def tokenize_builtin(self):
        """
        Tokenize markup starting with b"<!", that is either a comment or
        a declaration such as b"<!DOCTYPE html>".
        """
        first = self._byte_at(self.position + 2)
        if first == DASH and self._byte_at(self.position + 3) == DASH:
            return self.tokenize_comment()
        elif first is not None and ord("A") <= first <= ord("Z"):
            return self.tokenize_decl()
        else:
            # Covers end of input as well as constructs such as
            # b"<![CDATA[" which are not recognized.
            return self.take_rest_as_error()

    def tokenize_comment(self):
        """
        Tokenize b"<!-- ... -->". The terminating b"-->" is searched for
        after the opening b"<!--", so b"<!-->" is not a complete comment.
        """
        search_from = self.position + 4
        while True:
            found = self._scanner.memchr(DASH, search_from)
            if found is None:
                return self.take_rest_as_error()
            follower = self._byte_at(found + 1)
            if follower is None:
                return self.take_rest_as_error()
            if follower == DASH and self._byte_at(found + 2) == GT:
                return self.take(TokenKind.COMMENT, found + 3)
            search_from = found + 1

    def tokenize_decl(self):
        """
        Tokenize b"<!KEYWORD ... >". If b"[" occurs before b">", the
        declaration opens an internal subset and the token ends at the b"[".
        """
        found = self._scanner.memchr2(GT, LSQB, self.position + 2)
        if found is None:
            return self.take_rest_as_error()
        if self._scanner[found] == LSQB:
            self.depth += 1
            if self.depth > 1 and not self._has_warned:
                self._has_warned = True
                warnings.warn(
                    f"Declaration at {self.position} opens internal subset "
                    f"number {self.depth}, a document has at most one "
                    "internal subset."
                )
        return self.take(TokenKind.DECL, found + 1)

    def tokenize_decl_end(self):
        """
        Tokenize b"]>" closing an internal subset.
        """
        return self._take_through(TokenKind.DECL_END, GT, self.position + 1)

    def tokenize_entity(self):
        """
        Tokenize an entity reference, ie. b"&amp;" or b"&#60;".
        """
        return self._take_through(TokenKind.ENTITY, SEMICOLON, self.position + 1)

    def tokenize_element(self):
        return self._take_through(TokenKind.ELEMENT, GT, self.position + 1)

    def tokenize_element_end(self):
        return self._take_through(TokenKind.ELEMENT_END, GT, self.position + 2)


def tokenize(buffer):
    """
    :returns: An iterator of the tokens in the given buffer, see Tokenizer.
    """
    return Tokenizer(buffer)
