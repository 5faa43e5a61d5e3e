# What it does: Encodes and decodes the "<type> <size>\0" prefix that frames every stored object
# How it does: Encoding is plain string formatting. Decoding scans forward for the null byte inside a fixed 128 byte window, so the type and size of an object can be read without decompressing its payload
# What data structure it uses: An Enum for the four object kinds

import enum

from .errors import HeaderMalformed

HEADER_LOOKAHEAD = 128


class ObjectType(enum.Enum):
    BLOB = 'blob'
    TREE = 'tree'
    COMMIT = 'commit'
    TAG = 'tag'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """
        Returns the ObjectType for a type tag such as 'blob'.
        Raises HeaderMalformed for anything unrecognised.
        """
        if isinstance(text, cls):
            return text
        try:
            return cls(text)
        except ValueError:
            raise HeaderMalformed(text, "unrecognized object type") from None


def encode_header(obj_type, size):
    obj_type = ObjectType.parse(obj_type)
    if size < 0:
        raise ValueError(f"object size cannot be negative: {size}")
    return f'{obj_type.value} {size}\0'.encode('ascii')


def decode_header(stream):
    """
    Reads the object header from a Tokenizer positioned at the start of an object.
    Returns (ObjectType, size, header_length), where header_length includes the
    null terminator. The stream is left positioned at the first payload byte.
    """
    raw = stream.read_until(b'\0', HEADER_LOOKAHEAD)
    if raw is None:
        raise HeaderMalformed(f"first {HEADER_LOOKAHEAD} bytes", "no null byte found in object header")

    try:
        header = raw.decode('ascii')
    except UnicodeDecodeError:
        raise HeaderMalformed(repr(raw), "object header is not ASCII") from None

    fields = header.split(' ', 1)
    if len(fields) != 2 or not fields[0] or not fields[1]:
        raise HeaderMalformed(header, "could not extract type and size from header")

    type_field, size_field = fields
    obj_type = ObjectType.parse(type_field)
    # ASCII digits only; int() would also take signs and whitespace
    if not (size_field.isascii() and size_field.isdigit()):
        raise HeaderMalformed(size_field, "invalid object size")

    return obj_type, int(size_field), len(raw) + 1
