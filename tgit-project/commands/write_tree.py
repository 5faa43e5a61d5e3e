# The command: tgit write-tree [--ignore | --ignore-file <file>] [--prefix <dir>] [-n]
# What it does: Creates a tree object from a directory and prints its hash
# How it does: It builds the ignore set once from the ignore file, then hands the root directory to the recursive tree builder, which hashes every file as a blob and every directory as a tree
# What data structure it uses: It builds a Merkle Tree bottom-up and uses a Set (the ignore set) for path exclusion

import os
import sys
from utils import repository, ignore, worktree, config as config_utils
from utils.errors import ObjectError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a tgit repository", file=sys.stderr)
        sys.exit(1)

    root_dir = os.getcwd()
    if args.prefix:
        root_dir = os.path.join(root_dir, args.prefix)
        if not os.path.isdir(root_dir):
            print(f"fatal: subdirectory {root_dir} does not exist", file=sys.stderr)
            sys.exit(1)

    # The ignore file lives where the command runs; its patterns apply to the (prefixed) root
    ignore_file = args.ignore_file
    if args.ignore and not ignore_file:
        ignore_file = config_utils.get_ignore_file(repo_root, os.getcwd())

    try:
        ignored = ignore.get_ignored_paths(root_dir, ignore_file)
    except OSError as e:
        print(f"fatal: cannot read ignore file {ignore_file}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)

    try:
        tree = worktree.write_tree(
            config_utils.get_objects_dir(repo_root),
            root_dir,
            ignored,
            write=not args.no_write,
            level=config_utils.get_compression_level(repo_root),
        )
    except (ObjectError, ValueError) as e:
        print(f"fatal: error writing tree: {e}", file=sys.stderr)
        sys.exit(1)

    print(tree.sha1)
