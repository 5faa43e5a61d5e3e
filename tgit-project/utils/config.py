# What it does: Manages all read/write operations for the `.tgit/config` file and resolves the settings the object store needs
# How it does: The INI file is handled by `configparser`. `get_objects_dir` and `get_compression_level` turn it into the values threaded through every object store call, with the TGIT_OBJECT_DIRECTORY environment variable taking precedence for the objects directory
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
import zlib

from .ignore import DEFAULT_IGNORE_FILE
from .repository import find_repo_root, get_tgit_dir

OBJECT_DIR_ENV = 'TGIT_OBJECT_DIRECTORY'


def get_config_path(repo_root): # Returns the path to the config file within the repository
    return os.path.join(get_tgit_dir(repo_root), 'config')


def default_config():
    config = configparser.ConfigParser()
    config.add_section('core')
    config.set('core', 'repositoryformatversion', '0')
    config.set('core', 'compression', str(zlib.Z_DEFAULT_COMPRESSION))
    return config


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_default_config(repo_root):
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        return
    with open(config_path, 'w') as configfile:
        default_config().write(configfile)


def write_config(key, value, repo_root=None): # Sets a configuration key to a value and writes it to the config file
    repo_root = repo_root or find_repo_root()
    if not repo_root:
        raise FileNotFoundError("Not a tgit repository.")

    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError("Error: Invalid key format. Should be 'section.key'.")
    if not section or not option:
        raise ValueError("Error: Invalid key format. Should be 'section.key'.")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_objects_dir(repo_root):
    env_dir = os.environ.get(OBJECT_DIR_ENV)
    if env_dir:
        return os.path.abspath(env_dir)
    objects_dir = read_config(repo_root).get('core', 'objectsdir', fallback='objects')
    return os.path.join(get_tgit_dir(repo_root), objects_dir)


def get_compression_level(repo_root):
    config = read_config(repo_root)
    try:
        level = config.getint('core', 'compression', fallback=zlib.Z_DEFAULT_COMPRESSION)
    except ValueError:
        raise ValueError(f"core.compression must be an integer: {config.get('core', 'compression')!r}")
    if not -1 <= level <= 9:
        raise ValueError(f"core.compression must be between -1 and 9, got {level}")
    return level


def get_ignore_file(repo_root, root_dir): # The ignore file is looked up in the directory the tree is built from
    name = read_config(repo_root).get('core', 'ignorefile', fallback=DEFAULT_IGNORE_FILE)
    return os.path.join(root_dir, name)
