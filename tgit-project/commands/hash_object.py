# The command: tgit hash-object [-w] [-t <type>] <file>...
# What it does: Computes the object hash of each file and optionally writes the object into the object database
# How it does: The file's bytes are framed with a "<type> <size>\0" header and hashed with SHA-1. With -w the framed bytes are compressed and stored under the hash
# What data structure it uses: Hash Table / Dictionary (the object database, keyed by SHA-1)

import sys
import zlib
from utils import repository, objects, config as config_utils
from utils.errors import ObjectError
from utils.header import ObjectType
from utils.tree import decode_tree

def run(args):
    objects_dir = None
    level = zlib.Z_DEFAULT_COMPRESSION
    if args.write:
        repo_root = repository.find_repo_root()
        if not repo_root:
            print("fatal: not a tgit repository", file=sys.stderr)
            sys.exit(1)
        try:
            objects_dir = config_utils.get_objects_dir(repo_root)
            level = config_utils.get_compression_level(repo_root)
        except ValueError as e:
            print(f"fatal: {e}", file=sys.stderr)
            sys.exit(1)

    obj_type = ObjectType.parse(args.type)
    for path in args.files:
        try:
            content = objects.read_file(path)
            if obj_type == ObjectType.TREE:
                decode_tree(content, path) # Refuse to store a tree that cannot be read back
            obj = objects.hash_object(objects_dir, content, obj_type, write=args.write, level=level)
        except OSError as e:
            print(f"fatal: could not open '{path}' for reading: {e.strerror or e}", file=sys.stderr)
            sys.exit(1)
        except ObjectError as e:
            print(f"fatal: {e}", file=sys.stderr)
            sys.exit(1)

        print(obj.sha1)
