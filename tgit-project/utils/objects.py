# What it does: Manages the low-level object database, handling the storage and retrieval of blobs, trees, commits and tags
# How it does: It implements a content-addressed storage system. `hash_object` frames content with its header, hashes it and optionally writes it; `open_object` streams an object back through an incremental zlib decompressor so callers can stop after the header
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed dictionary on disk where the SHA-1 hash is the key)

import os
import hashlib
import string
import tempfile
import zlib
from collections import namedtuple
from contextlib import contextmanager

from .errors import CorruptObject, HeaderMalformed, ObjectNotFound, StorageError
from .header import ObjectType, decode_header, encode_header
from .stream import CHUNK_SIZE, Tokenizer

Object = namedtuple('Object', ['sha1', 'type', 'size', 'content'])


def is_valid_sha1(sha1):
    return len(sha1) == 40 and all(c in string.hexdigits for c in sha1)


def object_path(objects_dir, sha1): # Splits the hash into a 2 character directory and a 38 character file name
    if not is_valid_sha1(sha1):
        raise ObjectNotFound(sha1, "not a valid object name")
    sha1 = sha1.lower()
    return os.path.join(objects_dir, sha1[:2], sha1[2:])


def make_object(content, obj_type=ObjectType.BLOB): # Frames and hashes content without touching the disk
    obj_type = ObjectType.parse(obj_type)
    data = encode_header(obj_type, len(content)) + content
    return Object(hashlib.sha1(data).hexdigest(), obj_type, len(content), content)


def read_file(path):
    """
    Returns the bytes a file is stored as. Symlinks are not followed: the
    content is the link target, the same way git stores them.
    """
    if os.path.islink(path):
        return os.fsencode(os.readlink(path))
    with open(path, 'rb') as f:
        return f.read()


def hash_file(path): # Builds the blob for a single file
    return make_object(read_file(path), ObjectType.BLOB)


def hash_object(objects_dir, content, obj_type=ObjectType.BLOB, write=False, level=zlib.Z_DEFAULT_COMPRESSION):
    obj = make_object(content, obj_type)
    if write:
        write_object(objects_dir, obj, level)
    return obj


def write_object(objects_dir, obj, level=zlib.Z_DEFAULT_COMPRESSION):
    """
    Compresses header + content into <objects_dir>/<2 hex>/<38 hex>.
    Writing an object that is already stored leaves the existing file alone.
    """
    path = object_path(objects_dir, obj.sha1)
    if os.path.exists(path):
        return path

    data = encode_header(obj.type, len(obj.content)) + obj.content
    object_dir = os.path.dirname(path)
    try:
        os.makedirs(object_dir, exist_ok=True)
        # Write to a temporary name first so readers never see half an object
        fd, tmp_path = tempfile.mkstemp(dir=object_dir, prefix='tmp_obj_')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(zlib.compress(data, level))
            os.chmod(tmp_path, 0o444)
            os.replace(tmp_path, path)
        except BaseException:
            os.unlink(tmp_path)
            raise
    except OSError as e:
        raise StorageError(obj.sha1, f"could not write object ({e.strerror or e})") from e
    return path


class _Inflater:
    # File-like reader that decompresses an object file on demand

    def __init__(self, f, sha1):
        self._file = f
        self._sha1 = sha1
        self._decompressor = zlib.decompressobj()
        self._buffer = bytearray()

    def _inflate(self, data):
        try:
            return self._decompressor.decompress(data, CHUNK_SIZE)
        except zlib.error as e:
            raise CorruptObject(self._sha1, f"error decompressing object ({e})") from e

    def _finish(self):
        try:
            tail = self._decompressor.flush()
        except zlib.error as e:
            raise CorruptObject(self._sha1, f"error decompressing object ({e})") from e
        if not self._decompressor.eof:
            raise CorruptObject(self._sha1, "object file is truncated")
        return tail

    def read(self, size=-1):
        while (size < 0 or len(self._buffer) < size) and not self._decompressor.eof:
            data = self._decompressor.unconsumed_tail
            if not data:
                data = self._file.read(CHUNK_SIZE)
            if data:
                self._buffer += self._inflate(data)
            else:
                self._buffer += self._finish()
        if size < 0:
            size = len(self._buffer)
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        return chunk


@contextmanager
def open_object(objects_dir, sha1):
    """
    Opens a stored object and yields a Tokenizer positioned at the start of
    its header. The file is closed on every exit path.
    """
    path = object_path(objects_dir, sha1)
    try:
        f = open(path, 'rb')
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise ObjectNotFound(sha1) from None
    with f:
        try:
            yield Tokenizer(_Inflater(f, sha1))
        except HeaderMalformed as e:
            if e.target == sha1:
                raise
            # Report the object, keep the header fragment in the message
            raise HeaderMalformed(sha1, f"{e.message} ({e.target})") from e


def read_header(objects_dir, sha1): # Returns (type, size) reading only as far as the header
    with open_object(objects_dir, sha1) as stream:
        obj_type, size, _ = decode_header(stream)
    return obj_type, size


def read_object(objects_dir, sha1, verify=False):
    """
    Reads an object by its SHA-1 hash and returns it as an Object.
    The payload length must match the header. With `verify`, the hash of the
    decompressed data is also recomputed and compared to `sha1`.
    """
    with open_object(objects_dir, sha1) as stream:
        obj_type, size, _ = decode_header(stream)
        content = stream.read()

    if len(content) != size:
        raise CorruptObject(sha1, f"bad length (header says {size}, found {len(content)})")

    obj = Object(sha1.lower(), obj_type, size, content)
    if verify:
        actual = make_object(content, obj_type).sha1
        if actual != obj.sha1:
            raise CorruptObject(sha1, f"hash mismatch (content hashes to {actual})")
    return obj


def copy_content(objects_dir, sha1, sink): # Streams the payload to a binary sink without loading it all at once
    with open_object(objects_dir, sha1) as stream:
        obj_type, size, _ = decode_header(stream)
        remaining = size
        while True:
            chunk = stream.read(CHUNK_SIZE)
            if not chunk:
                break
            remaining -= len(chunk)
            sink.write(chunk)
    if remaining != 0:
        raise CorruptObject(sha1, f"bad length (header says {size}, found {size - remaining})")
    return obj_type
