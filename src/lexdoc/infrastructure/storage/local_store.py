"""Local directory output store — implements OutputStorePort.

Every generated file lives directly inside one managed directory; the
utilities here refuse anything that is not a bare filename so callers
cannot reach outside it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lexdoc.domain.ports.output_store import OutputStorePort

logger = logging.getLogger(__name__)


class LocalOutputStore(OutputStorePort):
    """Flat directory of generated artifacts.

    Parameters
    ----------
    base_dir : Path | str
        Output directory. Created on construction if missing; a failure
        to create it is logged and later writes fail individually.
    """

    def __init__(self, base_dir: Path | str) -> None:
        self._base_dir = Path(base_dir)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Error creating output directory %s: %s", self._base_dir, exc)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, filename: str) -> Path:
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            raise ValueError(f"Not a plain filename: {filename!r}")
        return self._base_dir / filename

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).is_file()

    def delete(self, filename: str) -> None:
        path = self.path_for(filename)
        try:
            path.unlink()
            logger.info("Deleted %s", path.name)
        except FileNotFoundError:
            logger.debug("File already deleted or not found: %s", path.name)
        except OSError as exc:
            logger.warning("Could not delete %s: %s", path.name, exc)
