# The command: tgit cat-file (-t | -s | -p) <object>
# What it does: Shows the type, the size, or the contents of a stored object
# How it does: Type and size queries decode only the header of the compressed object. -p streams the payload straight to stdout, except for trees, which are printed as an ls-tree style listing
# What data structure it uses: None directly; it reads from the Hash Table / Dictionary that is the object database

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
        if args.type:
            obj_type, _ = objects.read_header(objects_dir, args.object)
            print(formatters.format_type(obj_type))
        elif args.size:
            _, size = objects.read_header(objects_dir, args.object)
            print(formatters.format_size(size))
        else:
            pretty_print(objects_dir, args.object)
    except ObjectError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

def pretty_print(objects_dir, sha1):
    obj_type, _ = objects.read_header(objects_dir, sha1)
    if obj_type == ObjectType.TREE:
        obj = objects.read_object(objects_dir, sha1)
        sys.stdout.write(formatters.format_tree(objects_dir, decode_tree(obj.content, sha1)))
        return

    sys.stdout.flush()
    objects.copy_content(objects_dir, sha1, sys.stdout.buffer)
    sys.stdout.buffer.flush()
