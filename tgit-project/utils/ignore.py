# What it does: Implements the ignore file functionality used by write-tree
# How it does: Each pattern in the ignore file is expanded with glob against the root directory being scanned, and every match is stored as an absolute path. The tree builder then skips any child whose path is in that set
# What data structure it uses: Set (a frozenset of absolute paths for O(1) average membership tests)

import glob
import os

from .repository import TGIT_DIR

DEFAULT_IGNORE_FILE = '.tgitignore'


def read_patterns(ignore_file):
    """
    Reads the ignore file and returns its glob patterns in file order.
    Blank lines and lines starting with '#' are skipped.
    """
    patterns = []
    with open(ignore_file, 'r') as f:
        for line in f:
            line = line.rstrip()
            if line and not line.startswith('#'):
                patterns.append(line)
    return patterns


def get_ignored_paths(root_dir, ignore_file=None): # Builds the set of absolute paths excluded from a tree build
    root = os.path.realpath(root_dir)
    ignored = {os.path.join(root, TGIT_DIR)} # Never store the repository inside itself

    if ignore_file is not None:
        for pattern in read_patterns(ignore_file):
            for match in glob.glob(pattern, root_dir=root, include_hidden=True):
                ignored.add(os.path.normpath(os.path.join(root, match)))

    return frozenset(ignored)


def is_ignored(path, ignored): # Returns True if the path was matched by an ignore pattern
    return path in ignored
