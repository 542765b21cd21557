"""
Search primitives in the style of memchr, memchr2 and memchr3: find the
offset of the first occurrence of one of a few bytes at or after a given
offset in a buffer.

Searching for the nearest of several bytes with one bytes.find per needle
may run to the end of the buffer for each rare needle, and the tokenizer
searches from every token boundary. Instead, ByteScanner compares windows
of the buffer against all needles at once, starting with a small window and
doubling it, so a search reads at most about twice as far as the match.
"""

import numpy as np

WINDOW_SIZE = 64


class ByteScanner:
    def __init__(self, buffer):
        """
        :param buffer: Any C-contiguous object supporting the buffer
            protocol with one byte items, ie. bytes, bytearray, memoryview
            or mmap. The buffer is not copied.
        """
        self._array = np.frombuffer(buffer, dtype=np.uint8)

    def __len__(self):
        return len(self._array)

    def __getitem__(self, offset):
        return int(self._array[offset])

    def find(self, needles, start=0):
        """
        :param needles: Iterable of bytes as integers, ie. ord("<").
        :param start: The offset to start searching from.
        :returns: The first offset at or after start containing any of the
            needles, or None if there is no such offset.
        """
        needles = np.array(list(needles), dtype=np.uint8)
        end = len(self._array)
        window_size = WINDOW_SIZE
        while start < end:
            window = self._array[start : start + window_size]
            hits = np.flatnonzero(np.isin(window, needles))
            if len(hits) > 0:
                return start + int(hits[0])
            start += len(window)
            window_size *= 2
        return None

    def memchr(self, needle, start=0):
        return self.find((needle,), start)

    def memchr2(self, needle1, needle2, start=0):
        return self.find((needle1, needle2), start)

    def memchr3(self, needle1, needle2, needle3, start=0):
        return self.find((needle1, needle2, needle3), start)
