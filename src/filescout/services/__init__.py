from .directory_walker import DirectoryWalker
from .largest_file import largest_file
from .max_selector import MaxResult, select_max


__all__ = [
    'DirectoryWalker',
    'MaxResult',
    'largest_file',
    'select_max',
]
