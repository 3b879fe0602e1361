# /app/services/database_helpers/storage_repository_file.py

"""
File implementation of the durable key-value store, used for local
development. Each key is one UTF-8 text file `<data_dir>/<key>.json`.
"""

import os
from typing import Optional


class StorageRepositoryFile:
    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def _path_for(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def get_value(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set_value(self, key: str, value: str) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        path = self._path_for(key)
        # Written beside the target, then swapped in atomically.
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(value)
        os.replace(tmp_path, path)
