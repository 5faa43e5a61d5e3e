# What it does: Builds tree objects from a directory on disk (the engine behind write-tree)
# How it does: It walks the directory depth-first. Files become blobs, subdirectories are built by a recursive call that returns the finished subtree, and each directory's entries are sorted by name before the tree is encoded and hashed
# What data structure it uses: It builds a Merkle Tree bottom-up using recursion; a child's hash must be known before its parent's bytes can be computed

import os
import stat
import zlib

from .errors import TreeBuildError
from .header import ObjectType
from .ignore import is_ignored
from .objects import hash_file, make_object, write_object
from .tree import (MODE_EXECUTABLE, MODE_FILE, MODE_SYMLINK, MODE_TREE,
                   TreeEntry, encode_tree, sort_key)


def file_mode(st_mode): # Translates filesystem metadata to the git file mode convention
    if stat.S_ISDIR(st_mode):
        return MODE_TREE
    if stat.S_ISLNK(st_mode):
        return MODE_SYMLINK
    if st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        return MODE_EXECUTABLE
    return MODE_FILE


def _build(directory, ignored, on_blob, trees):
    try:
        with os.scandir(directory) as it:
            children = list(it)
    except OSError as e:
        raise TreeBuildError(directory, f"cannot create tree ({e.strerror or e})") from e

    entries = []
    for child in children:
        if is_ignored(child.path, ignored):
            continue
        try:
            st_mode = child.stat(follow_symlinks=False).st_mode
        except OSError as e:
            raise TreeBuildError(child.path, f"cannot stat ({e.strerror or e})") from e

        if stat.S_ISDIR(st_mode):
            subtree = _build(child.path, ignored, on_blob, trees)
            entries.append(TreeEntry(MODE_TREE, child.name, subtree.sha1))
        elif stat.S_ISREG(st_mode) or stat.S_ISLNK(st_mode):
            try:
                blob = hash_file(child.path)
            except OSError as e:
                raise TreeBuildError(child.path, f"error hashing ({e.strerror or e})") from e
            on_blob(blob)
            entries.append(TreeEntry(file_mode(st_mode), child.name, blob.sha1))
        # fifos, sockets and device files have no object representation

    entries.sort(key=sort_key)
    tree = make_object(encode_tree(entries), ObjectType.TREE)
    trees.append(tree)
    return tree


def write_tree(objects_dir, directory, ignored=frozenset(), write=True, level=zlib.Z_DEFAULT_COMPRESSION):
    """
    Builds the tree object for `directory` and returns it.

    Paths in `ignored` (absolute, resolved against `directory`) are left out
    entirely. When `write` is set, blobs are stored as they are hashed and the
    tree objects are stored once the whole walk has succeeded, so a failed
    build never leaves a tree behind.
    """
    root = os.path.realpath(directory)
    if not os.path.isdir(root):
        raise TreeBuildError(directory, "not a directory")

    def on_blob(blob):
        if write:
            write_object(objects_dir, blob, level)

    trees = []
    root_tree = _build(root, ignored, on_blob, trees)

    if write:
        for tree in trees:
            write_object(objects_dir, tree, level)
    return root_tree
