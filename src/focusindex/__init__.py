"""
Focus-by-index

Pick one of the currently open files from a numbered, filterable list by
typing its index or part of its label. Labels are the shortest trailing
path that tells an open file apart from every other open file, so two
``index.ts`` files show up as ``a/index.ts`` and ``b/index.ts``.

Main Functions:
    disambiguate(paths): map each full path to its shortest unique suffix
    Picker: numbered rows, filtering, digit jumps and label -> path resolution

Example Usage:
    from focusindex import Picker

    picker = Picker()
    picker.open(["src/a/index.ts", "src/b/index.ts", "README.md"])
    for item in picker.items():
        print(item.text)          # "1: a/index.ts", "2: b/index.ts", "3: README.md"

    picker.accept("2")            # -> "src/b/index.ts"
"""

# src/focusindex/__init__.py
from .disambiguate import disambiguate  # re-export
from .engine import Picker, SelectionError
from .models import Chunk, PickItem

__version__ = "1.0.0"
__all__ = ["disambiguate", "Picker", "SelectionError", "Chunk", "PickItem"]
