from __future__ import annotations

import shutil
from pathlib import Path


class LocalFileSystem:
    def read_dir(self, folder: Path) -> list[str]:
        return sorted(entry.name for entry in folder.iterdir() if entry.is_file())

    def ensure_dir(self, folder: Path) -> None:
        folder.mkdir(parents=True, exist_ok=True)

    def write_bytes(self, path: Path, data: bytes) -> None:
        self.ensure_dir(path.parent)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp_path.write_bytes(data)
            tmp_path.replace(path)
        finally:
            tmp_path.unlink(missing_ok=True)
        print(f"wrote {path}")

    def write_text(self, path: Path, text: str) -> None:
        self.write_bytes(path, text.encode("utf-8"))

    def delete_file(self, path: Path) -> None:
        path.unlink(missing_ok=True)

    def delete_tree(self, folder: Path) -> None:
        if folder.is_dir():
            shutil.rmtree(folder)
        elif folder.exists():
            folder.unlink()
