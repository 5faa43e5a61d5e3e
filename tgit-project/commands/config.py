# The command: tgit config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., core.compression)
# How it does: It acts as a simple dispatcher, passing the key and value to the `write_config` function in the `utils/config.py` module, which handles the file I/O and parsing logic

import sys
from utils import config as config_utils

def run(args):
    try: # Set the configuration key-value pair
        config_utils.write_config(args.key, args.value)
        print(f"Set {args.key} to '{args.value}'")
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
