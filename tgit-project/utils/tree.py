# What it does: Encodes and decodes the binary payload of tree objects
# How it does: Each entry is "<mode> <name>\0" followed by the 20 raw bytes of the child's SHA-1, with entries concatenated in byte-wise name order. Decoding walks the payload with the bounded Tokenizer
# What data structure it uses: A sorted list of TreeEntry tuples (the canonical order is what makes equal directories hash equally)

import io
import os
from collections import namedtuple

from .errors import CorruptTree
from .header import ObjectType
from .objects import is_valid_sha1
from .stream import Tokenizer

MODE_TREE = '040000'
MODE_FILE = '100644'
MODE_EXECUTABLE = '100755'
MODE_SYMLINK = '120000'

MODE_LOOKAHEAD = 8
NAME_LOOKAHEAD = 4096
SHA1_SIZE = 20

TreeEntry = namedtuple('TreeEntry', ['mode', 'name', 'sha1'])


def entry_type(mode):
    return ObjectType.TREE if mode == MODE_TREE else ObjectType.BLOB


def sort_key(entry):
    return os.fsencode(entry.name)


def _check_entry(entry):
    if len(entry.mode) != 6 or any(c not in '01234567' for c in entry.mode):
        raise ValueError(f"invalid mode {entry.mode!r} for {entry.name!r}")
    if not entry.name or '/' in entry.name or '\0' in entry.name:
        raise ValueError(f"invalid tree entry name {entry.name!r}")
    if not is_valid_sha1(entry.sha1):
        raise ValueError(f"invalid object name {entry.sha1!r} for {entry.name!r}")


def encode_tree(entries):
    """
    Serializes tree entries into their canonical byte form.
    Entries are sorted by name bytes first, so any insertion order gives the
    same bytes. Names must be unique.
    """
    out = []
    previous = None
    for entry in sorted(entries, key=sort_key):
        _check_entry(entry)
        name = os.fsencode(entry.name)
        if name == previous:
            raise ValueError(f"duplicate tree entry {entry.name!r}")
        previous = name
        out.append(entry.mode.encode('ascii') + b' ' + name + b'\0' + bytes.fromhex(entry.sha1))
    return b''.join(out)


def decode_tree(data, sha1=None):
    """
    Parses a tree payload into a list of TreeEntry, in stored order.
    Modes written without their leading zero (e.g. '40000') are padded back
    to six characters. `sha1` is only used in error messages.
    """
    target = sha1 or 'tree'
    stream = Tokenizer(io.BytesIO(data))
    entries = []
    while not stream.at_eof():
        mode = stream.read_until(b' ', MODE_LOOKAHEAD)
        if mode is None:
            raise CorruptTree(target, f"unable to extract mode of entry {len(entries)}")

        name = stream.read_until(b'\0', NAME_LOOKAHEAD)
        if name is None:
            raise CorruptTree(target, f"unable to read name of entry {len(entries)}")

        raw_sha1 = stream.read_exact(SHA1_SIZE)
        if raw_sha1 is None:
            raise CorruptTree(target, f"unable to read SHA-1 of entry {len(entries)}")

        try:
            mode = mode.decode('ascii').rjust(6, '0')
        except UnicodeDecodeError:
            raise CorruptTree(target, f"invalid mode in entry {len(entries)}") from None
        entries.append(TreeEntry(mode, os.fsdecode(name), raw_sha1.hex()))
    return entries
