"""
Components module - the selection and synchronization engine.

Reconciles three sets of files for one run:
- remote-available (index_available)
- locally present (find_local)
- user requested (select_files)

and applies them to the destination directory in one of four modes.

Public API:
- index_available: Build the name -> file map from the remote directory
- component_name: Strip extension and internal prefix from a file name
- filter_to_local: Restrict the map to files present locally
- find_local: Tracked files already in the destination
- select_files: Resolve the requested names into file names
- copy_files / update_files / remove_files / uninstall_files: Mode executors
"""

from .executor import CopyReport
from .executor import UninstallReport
from .executor import copy_files
from .executor import remove_files
from .executor import uninstall_files
from .executor import update_files
from .index import component_name
from .index import filter_to_local
from .index import index_available
from .local_state import find_local
from .selection import select_files

__all__ = [
    "index_available",
    "component_name",
    "filter_to_local",
    "find_local",
    "select_files",
    "copy_files",
    "update_files",
    "remove_files",
    "uninstall_files",
    "CopyReport",
    "UninstallReport",
]
