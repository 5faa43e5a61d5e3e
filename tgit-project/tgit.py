import argparse
from commands import init, cat_file, hash_object, ls_tree, write_tree, config
from utils.header import ObjectType
# The main entry point for the tgit object store
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="tgit: a content-addressable object store.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository.")
    init_parser.add_argument("directory", nargs="?", help="Where to create the repository (default: current directory).")
    init_parser.add_argument("-q", "--quiet", action="store_true", help="Only print error and warning messages.")
    init_parser.set_defaults(func=init.run)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Show the type, size or content of an object.")
    cat_file_group = cat_file_parser.add_mutually_exclusive_group(required=True)
    cat_file_group.add_argument("-t", dest="type", action="store_true", help="Show the object type.")
    cat_file_group.add_argument("-s", dest="size", action="store_true", help="Show the object size.")
    cat_file_group.add_argument("-p", dest="pretty", action="store_true", help="Pretty-print the object content.")
    cat_file_parser.add_argument("object", help="The object hash.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: hash-object
    hash_object_parser = subparsers.add_parser("hash-object", help="Compute object hashes and optionally store the objects.")
    hash_object_parser.add_argument("-w", dest="write", action="store_true", help="Write the object into the object database.")
    hash_object_parser.add_argument("-t", dest="type", default="blob",
                                    choices=[t.value for t in ObjectType], help="Object type (default: blob).")
    hash_object_parser.add_argument("files", nargs="+", help="Files to hash.")
    hash_object_parser.set_defaults(func=hash_object.run)

    # Command: ls-tree
    ls_tree_parser = subparsers.add_parser("ls-tree", help="List the contents of a tree object.")
    ls_tree_group = ls_tree_parser.add_mutually_exclusive_group()
    ls_tree_group.add_argument("--name-only", action="store_true", help="List only entry names, one per line.")
    ls_tree_group.add_argument("-l", "--long", action="store_true", help="Show the size of blob entries.")
    ls_tree_parser.add_argument("tree", help="The tree hash.")
    ls_tree_parser.set_defaults(func=ls_tree.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Create a tree object from the current directory.")
    write_tree_group = write_tree_parser.add_mutually_exclusive_group()
    write_tree_group.add_argument("--ignore", action="store_true", help="Skip paths matching patterns in the ignore file (.tgitignore).")
    write_tree_group.add_argument("--ignore-file", help="Skip paths matching patterns in this file.")
    write_tree_parser.add_argument("--prefix", help="Write the tree for this subdirectory.")
    write_tree_parser.add_argument("-n", "--no-write", action="store_true", help="Compute the tree hash without storing any objects.")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.compression).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
