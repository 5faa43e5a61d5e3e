# What it does: Provides a small buffered reader used to parse object headers and tree entries
# How it does: It pulls bytes from an underlying reader only as far as a caller asks, so a header can be parsed without reading the whole object
# What data structure it uses: A bytearray buffer that acts as a FIFO queue in front of the raw stream

CHUNK_SIZE = 8192


class Tokenizer:
    def __init__(self, raw, chunk_size=CHUNK_SIZE):
        self._raw = raw
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._exhausted = False

    def _fill(self, size):
        # Reads from the raw stream until at least `size` bytes are buffered or it runs dry
        while len(self._buffer) < size and not self._exhausted:
            data = self._raw.read(max(size - len(self._buffer), self._chunk_size))
            if not data:
                self._exhausted = True
                break
            self._buffer += data

    def _take(self, size):
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def read(self, size=-1):
        if size < 0:
            while not self._exhausted:
                self._fill(len(self._buffer) + self._chunk_size)
            return self._take(len(self._buffer))
        self._fill(size)
        return self._take(size)

    def read_exact(self, size):
        """
        Returns exactly `size` bytes, or None if the stream ends first.
        Nothing is consumed on failure.
        """
        self._fill(size)
        if len(self._buffer) < size:
            return None
        return self._take(size)

    def read_until(self, delimiter, limit):
        """
        Returns the bytes before `delimiter` and consumes the delimiter too.
        Looks at no more than `limit` bytes; returns None (consuming nothing)
        when the delimiter is not found within that window.
        """
        searched = 0
        while True:
            index = self._buffer.find(delimiter, searched, limit)
            if index != -1:
                token = self._take(index)
                del self._buffer[:len(delimiter)]
                return token
            if len(self._buffer) >= limit or self._exhausted:
                return None
            searched = max(len(self._buffer) - len(delimiter) + 1, 0)
            self._fill(min(len(self._buffer) + self._chunk_size, limit))

    def at_eof(self):
        self._fill(1)
        return not self._buffer
