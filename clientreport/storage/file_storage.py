import re
import time
from pathlib import Path

from clientreport.processor.exceptions import StorageError, UnsupportedStorageDiskError

_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_file_name(file_name: str) -> str:
    """Replace everything outside [A-Za-z0-9.-] with '_'."""
    return _UNSAFE_NAME_CHARS.sub("_", file_name)


def build_storage_path(owner_id: str, project_id: int, file_name: str, epoch_ms: int) -> str:
    """Object key for an upload: {owner_id}/{project_id}/{epoch_ms}-{sanitized name}"""
    return f"{sanitize_file_name(owner_id)}/{project_id}/{epoch_ms}-{sanitize_file_name(file_name)}"


class FileStorage:
    """Stores uploaded file bytes under a root directory on local disk."""

    SUPPORTED_DISKS = ("local",)
    MAX_KEY_ATTEMPTS = 1000

    def __init__(self, files_root: Path, storage_disk: str = "local") -> None:
        if storage_disk not in self.SUPPORTED_DISKS:
            raise UnsupportedStorageDiskError(
                f"storage_disk '{storage_disk}' is not supported"
            )
        self._files_root = files_root

    def save(self, owner_id: str, project_id: int, file_name: str, data: bytes) -> str:
        """Write *data* and return its storage path relative to the root.

        Existing objects are never overwritten: on a key collision the
        millisecond stamp is bumped until a free key is found.

        Raises:
            StorageError: if the bytes cannot be written.
        """
        epoch_ms = int(time.time() * 1000)
        for _ in range(self.MAX_KEY_ATTEMPTS):
            storage_path = build_storage_path(owner_id, project_id, file_name, epoch_ms)
            target = self._resolve(storage_path)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                with open(target, "xb") as fh:
                    fh.write(data)
            except FileExistsError:
                epoch_ms += 1
                continue
            except OSError as exc:
                raise StorageError(f"Failed to store {storage_path}: {exc}") from exc
            return storage_path
        raise StorageError(f"No free storage key for {file_name} in project {project_id}")

    def load(self, storage_path: str) -> bytes:
        """Read stored bytes.

        Raises:
            StorageError: if nothing is stored at *storage_path* or it cannot be read.
        """
        path = self._resolve(storage_path)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise StorageError(f"Stored file not found: {storage_path}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read {storage_path}: {exc}") from exc

    def delete(self, storage_path: str) -> None:
        """Remove stored bytes. Missing objects are ignored."""
        try:
            self._resolve(storage_path).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to delete {storage_path}: {exc}") from exc

    def _resolve(self, storage_path: str) -> Path:
        root = self._files_root.resolve()
        path = (root / storage_path).resolve()
        if not path.is_relative_to(root):
            raise StorageError(f"Storage path escapes files root: {storage_path}")
        return path
