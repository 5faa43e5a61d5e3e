# What it does: Locates the repository that a command runs in and the directories inside it
# How it does: `find_repo_root` walks up the directory tree until it finds a `.tgit` directory
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root

import os

TGIT_DIR = '.tgit'


def find_repo_root(path='.'): # Recursively searches for the .tgit directory to find the repository root
    path = os.path.abspath(path)
    tgit_dir = os.path.join(path, TGIT_DIR)
    if os.path.isdir(tgit_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def get_tgit_dir(repo_root):
    return os.path.join(repo_root, TGIT_DIR)


def create_repository(path): # Creates the .tgit layout; returns False if it already existed
    tgit_dir = get_tgit_dir(path)
    existed = os.path.isdir(tgit_dir)

    os.makedirs(os.path.join(tgit_dir, 'objects'), exist_ok=True)
    os.makedirs(os.path.join(tgit_dir, 'refs', 'heads'), exist_ok=True)
    os.makedirs(os.path.join(tgit_dir, 'refs', 'tags'), exist_ok=True)

    head_path = os.path.join(tgit_dir, 'HEAD')
    if not os.path.exists(head_path):
        with open(head_path, 'w') as f:
            f.write('ref: refs/heads/master\n')

    return not existed
