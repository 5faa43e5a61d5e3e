# Shared pytest fixtures for tgit tests

import pytest
import os
import sys
import shutil
import tempfile

# Add tgit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'tgit-project'))


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def objects_dir(temp_dir):
    # A bare object directory, addressed explicitly by every store call
    path = os.path.join(temp_dir, 'objects')
    os.makedirs(path)
    return path


@pytest.fixture
def temp_repo(temp_dir, monkeypatch):
    # Creates an initialized tgit repository in a temporary directory and changes into it
    monkeypatch.delenv('TGIT_OBJECT_DIRECTORY', raising=False)
    tgit_dir = os.path.join(temp_dir, '.tgit')
    os.makedirs(os.path.join(tgit_dir, 'objects'))
    os.makedirs(os.path.join(tgit_dir, 'refs', 'heads'))
    with open(os.path.join(tgit_dir, 'HEAD'), 'w') as f:
        f.write('ref: refs/heads/master\n')
    with open(os.path.join(tgit_dir, 'config'), 'w') as f:
        f.write('[core]\n')
        f.write('repositoryformatversion = 0\n')
        f.write('compression = -1\n')

    os.chdir(temp_dir)
    yield temp_dir


@pytest.fixture
def scenario_dir(temp_dir):
    # A directory holding a.txt ("hello") and sub/b.txt ("world")
    root = os.path.join(temp_dir, 'work')
    os.makedirs(os.path.join(root, 'sub'))
    write_file(os.path.join(root, 'a.txt'), b'hello')
    write_file(os.path.join(root, 'sub', 'b.txt'), b'world')
    return root


@pytest.fixture
def repo_with_files(temp_repo):
    # The scenario layout created inside an initialized repository
    os.makedirs(os.path.join(temp_repo, 'sub'))
    write_file(os.path.join(temp_repo, 'a.txt'), b'hello')
    write_file(os.path.join(temp_repo, 'sub', 'b.txt'), b'world')
    return temp_repo


def write_file(path, content, mode=None):
    with open(path, 'wb') as f:
        f.write(content)
    if mode is not None:
        os.chmod(path, mode)
    return path


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
