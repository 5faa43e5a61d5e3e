# The command: tgit init
# What it does: Initializes a new, empty repository by creating the hidden `.tgit` directory and its internal structure
# How it does: It creates the `objects` and `refs` subdirectories, a `HEAD` file pointing to the default 'master' branch, and a default config file
# What data structure it uses: Tree (the file system directory structure is a tree). It lays the foundation for a Hash Table (the object database)

import os
import sys
from utils import repository, config as config_utils

def run(args):
    path = os.path.abspath(getattr(args, 'directory', None) or os.getcwd())
    tgit_dir = repository.get_tgit_dir(path)

    try:
        created = repository.create_repository(path)
        config_utils.write_default_config(path)
    except OSError as e:
        print(f"fatal: cannot initialize repository in {tgit_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    if getattr(args, 'quiet', False):
        return
    if created:
        print(f"Initialized empty tgit repository in {tgit_dir}/")
    else:
        print(f"Reinitialized existing tgit repository in {tgit_dir}/")
