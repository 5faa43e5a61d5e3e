# Unit tests for utils/repository.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'tgit-project'))

from utils import repository


class TestFindRepoRoot:
    # Tests for repository.find_repo_root()

    def test_finds_repo_in_current_dir(self, temp_repo):
        # Should find repo when in root directory
        result = repository.find_repo_root(temp_repo)
        assert result == temp_repo

    def test_finds_repo_in_subdirectory(self, temp_repo):
        # Should find repo when in a subdirectory
        subdir = os.path.join(temp_repo, 'src', 'deep', 'nested')
        os.makedirs(subdir)
        os.chdir(subdir)

        result = repository.find_repo_root()
        # Use realpath to resolve symlinks
        assert os.path.realpath(result) == os.path.realpath(temp_repo)

    def test_returns_none_when_not_in_repo(self, temp_dir):
        # Should return None when not in a repository
        result = repository.find_repo_root(temp_dir)
        assert result is None


class TestCreateRepository:
    # Tests for repository.create_repository()

    def test_creates_layout(self, temp_dir):
        assert repository.create_repository(temp_dir) is True

        tgit_dir = os.path.join(temp_dir, '.tgit')
        assert os.path.isdir(os.path.join(tgit_dir, 'objects'))
        assert os.path.isdir(os.path.join(tgit_dir, 'refs', 'heads'))
        with open(os.path.join(tgit_dir, 'HEAD')) as f:
            assert f.read() == 'ref: refs/heads/master\n'

    def test_reinitialize_keeps_head(self, temp_repo):
        head_path = os.path.join(temp_repo, '.tgit', 'HEAD')
        with open(head_path, 'w') as f:
            f.write('ref: refs/heads/feature\n')

        assert repository.create_repository(temp_repo) is False
        with open(head_path) as f:
            assert f.read() == 'ref: refs/heads/feature\n'
