import mmap
import pathlib
from contextlib import contextmanager

import _xtoken.tokenizer as xmltok
from _xtoken.tokenizer.errors import WrongFileModeError


def read(filelike, strict=False):
    """
    Reads an xml document and returns a list of (kind, value) pairs,
    ie. tokens = read("/my/file.xml")

    The values are copies of the bytes of each token, so that they can
    be used after the file has been closed.

    :param filelike: Either a path to a file, a stream opened in binary
        mode, or a bytes-like object containing the document.
    :param strict: If True, raise TokenizationError on malformed markup
        instead of returning it as the last token.
    """
    with lazy_read(filelike) as tokenizer:
        tokens = tokenizer
        if strict:
            tokens = xmltok.raise_on_error(tokens, tokenizer.buffer)
        return list(xmltok.with_values(tokens, tokenizer.buffer))


def read_contents(filelike):
    if isinstance(filelike, (bytes, bytearray, memoryview, mmap.mmap)):
        return filelike

    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as file_stream:
            return file_stream.read()

    if hasattr(filelike, "read"):
        contents = filelike.read()
        if isinstance(contents, str):
            raise WrongFileModeError("Xml file was opened in text mode!")
        return contents

    return filelike


@contextmanager
def lazy_read(filelike):
    """
    Context manager giving a Tokenizer for the given xml document, ie.

    >>> with lazy_read(b"<x/>") as tokenizer:
    ...     [t.get_value(tokenizer.buffer) for t in tokenizer]
    [b'<x/>']

    Files are read into memory in their entirety, but tokens are only
    generated as the tokenizer is iterated over.
    """
    yield xmltok.Tokenizer(read_contents(filelike))
