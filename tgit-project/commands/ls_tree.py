# The command: tgit ls-tree [--name-only | --long | -l] <tree>
# What it does: Lists the entries of a tree object
# How it does: It reads and decodes the tree payload, then resolves each entry's hash back through the object store to print its type and, for --long, its size
# What data structure it uses: List (the decoded entries, already in canonical sorted order)

import sys
from utils import repository, objects, formatters, config as config_utils
from utils.errors import ObjectError
from utils.header import ObjectType
from utils.tree import decode_tree

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a tgit repository", file=sys.stderr)
        sys.exit(1)
    objects_dir = config_utils.get_objects_dir(repo_root)

    try:
        obj = objects.read_object(objects_dir, args.tree)
        if obj.type != ObjectType.TREE:
            print(f"fatal: not a tree object: {args.tree}", file=sys.stderr)
            sys.exit(1)
        entries = decode_tree(obj.content, obj.sha1)
        output = formatters.format_tree(objects_dir, entries, list_mode(args))
    except ObjectError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(output)

def list_mode(args): # Maps the (mutually exclusive) flags onto a listing layout
    if getattr(args, 'name_only', False):
        return 'name-only'
    if getattr(args, 'long', False):
        return 'long'
    return 'default'
