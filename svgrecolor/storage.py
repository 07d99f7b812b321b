"""Upload store — temporary files behind the HTTP service.

Uploads are saved as ``<uuid><ext>`` and their conversions as
``converted-<uuid><ext>`` in a single flat directory. Callers refer to files
by those bare names; anything that would leave the directory is refused.
"""

from __future__ import annotations

import io
import logging
import time
import uuid
import zipfile
from collections.abc import Iterable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

CONVERTED_PREFIX = "converted-"
ARCHIVE_NAME = "converted-svgs.zip"


class UploadStore:
    """Flat temp-file store for uploaded and converted SVGs."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path | None:
        """Path of a bare file name inside the store, or None if the name is unsafe."""
        if not name or Path(name).name != name or name in (".", ".."):
            return None
        return self.root / name

    def save_upload(self, original_name: str, data: bytes) -> str:
        """Store uploaded bytes under a fresh unique name. Returns that name."""
        stored = f"{uuid.uuid4()}{Path(original_name).suffix}"
        (self.root / stored).write_bytes(data)
        logger.debug("Stored upload %s as %s", original_name, stored)
        return stored

    def save_converted(self, stored_name: str, text: str) -> str:
        converted = CONVERTED_PREFIX + stored_name
        (self.root / converted).write_text(text, encoding="utf-8")
        return converted

    def discard(self, stored_name: str) -> None:
        """Remove an upload that will never be handed back to the client."""
        path = self.path_for(stored_name)
        if path is None:
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Error deleting %s: %s", stored_name, e)

    def resolve(self, file_id: str) -> Path | None:
        """Find a stored file by id, with or without the ``converted-`` prefix."""
        raw = file_id.removeprefix(CONVERTED_PREFIX)
        for candidate in (file_id, CONVERTED_PREFIX + raw, CONVERTED_PREFIX + file_id):
            path = self.path_for(candidate)
            if path is not None and path.is_file():
                return path
        return None

    def build_archive(self, file_ids: Iterable[str], names: Mapping[str, str] | None = None) -> tuple[bytes, int]:
        """Zip the given files in memory. Returns (zip bytes, number of files added).

        Each entry is named from ``names`` (keyed by id or raw id), defaulting to
        ``converted-<raw id>``. Unknown ids are skipped; raises FileNotFoundError
        when nothing could be added.
        """
        names = names or {}
        buffer = io.BytesIO()
        added = 0
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
            for file_id in file_ids:
                path = self.resolve(file_id)
                if path is None:
                    logger.warning("File not found for ID: %s", file_id)
                    continue
                raw = Path(file_id).name.removeprefix(CONVERTED_PREFIX)
                entry = names.get(file_id) or names.get(raw) or CONVERTED_PREFIX + raw
                archive.write(path, arcname=entry)
                added += 1
        if not added:
            raise FileNotFoundError("No valid files found to add to ZIP")
        logger.info("Built archive with %d files", added)
        return buffer.getvalue(), added

    def cleanup(self, file_ids: Iterable[str]) -> tuple[list[str], list[str]]:
        """Delete files and their converted/unconverted partners. Returns (deleted, failed)."""
        deleted: list[str] = []
        failed: list[str] = []
        for file_id in file_ids:
            if file_id.endswith(".zip"):
                logger.debug("Skipping archive id %s", file_id)
                continue
            if self.path_for(file_id) is None:
                failed.append(file_id)
                continue

            candidates = [file_id]
            if file_id.startswith(CONVERTED_PREFIX):
                candidates.append(file_id.removeprefix(CONVERTED_PREFIX))
            else:
                candidates.append(CONVERTED_PREFIX + file_id)

            for name in candidates:
                path = self.root / name
                try:
                    if path.is_file():
                        path.unlink()
                        deleted.append(name)
                        logger.info("Deleted file: %s", name)
                except OSError as e:
                    logger.error("Error deleting %s: %s", name, e)
                    if file_id not in failed:
                        failed.append(file_id)
        return deleted, failed

    def purge_expired(self, max_age_seconds: float, now: float | None = None) -> list[str]:
        """Delete every stored file last modified more than ``max_age_seconds`` ago."""
        cutoff = (now if now is not None else time.time()) - max_age_seconds
        purged: list[str] = []
        for path in self.root.iterdir():
            try:
                if path.is_file() and path.stat().st_mtime < cutoff:
                    path.unlink()
                    purged.append(path.name)
            except OSError as e:
                logger.error("Error purging %s: %s", path.name, e)
        if purged:
            logger.info("Purged %d expired files", len(purged))
        return purged


# Singleton
_store: UploadStore | None = None


def get_upload_store() -> UploadStore:
    """Get or create the global UploadStore singleton."""
    global _store
    if _store is None:
        from svgrecolor.config import settings

        _store = UploadStore(settings.upload_dir)
    return _store
