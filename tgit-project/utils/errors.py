# What it does: Defines the exceptions raised by the object database and the tree builder
# How it does: Every error carries the offending hash or path in `target` so commands can report it; nothing here is retried
# What data structure it uses: A small class hierarchy rooted at ObjectError


class ObjectError(Exception):
    def __init__(self, target, message):
        super().__init__(f"{message}: {target}")
        self.target = target
        self.message = message


class ObjectNotFound(ObjectError):
    def __init__(self, target, message="object not found"):
        super().__init__(target, message)


class CorruptObject(ObjectError):
    pass


class CorruptTree(ObjectError):
    pass


class HeaderMalformed(ObjectError):
    pass


class StorageError(ObjectError):
    # Raised when an object cannot be written to disk
    pass


class TreeBuildError(ObjectError):
    # Raised when a directory or file cannot be read while building a tree
    pass
