# What it does: Renders objects for cat-file and ls-tree
# How it does: Type and size queries print header fields; tree listings look up every child's header in the object store to show its type and size
# What data structure it uses: List (of formatted lines, joined at the end)

from .header import ObjectType
from .objects import read_header

LIST_MODES = ('default', 'name-only', 'long', 'l')
SIZE_WIDTH = 7


def format_type(obj_type):
    return str(obj_type)


def format_size(size):
    return str(size)


def format_tree(objects_dir, entries, mode='default'):
    """
    Formats decoded tree entries, one line per entry:
      name-only:  <name>
      default:    <mode> <type> <sha1>\\t<name>
      long, l:    <mode> <type> <sha1> <size>\\t<name>
    Sizes are right-aligned in a field at least 7 wide; trees show '-'.
    """
    if mode not in LIST_MODES:
        raise ValueError(f"unknown listing mode: {mode}")

    lines = []
    for entry in entries:
        if mode == 'name-only':
            lines.append(f"{entry.name}\n")
            continue

        obj_type, size = read_header(objects_dir, entry.sha1)
        if mode == 'default':
            lines.append(f"{entry.mode} {obj_type} {entry.sha1}\t{entry.name}\n")
        else:
            size = '-' if obj_type == ObjectType.TREE else format_size(size)
            width = max(SIZE_WIDTH, len(size))
            lines.append(f"{entry.mode} {obj_type} {entry.sha1} {size:>{width}}\t{entry.name}\n")
    return ''.join(lines)
