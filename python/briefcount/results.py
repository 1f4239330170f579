"""Allocation of result folders unique to one program execution.

Folders live in `<pool>/all/<program_name>-<unique id>.exec/` and
`<pool>/latest` links to the most recently created one. A program started
from inside a result folder reuses that folder.
"""

import logging
import re
import sys
from pathlib import Path

from briefcount.config import Settings, configure_logging
from briefcount.strings import generate_unique_id

logger = logging.getLogger(__name__)

RESULT_FOLDER_MARK = ".resultFolderMetadata"
LATEST_LINK = "latest"
ALL_FOLDER = "all"
UNKNOWN_PROGRAM = "unknown_program"


def sanitize_program_name(name: str) -> str:
    """Reduce a program name to characters that are safe in a folder name."""
    slug = re.sub(r"[^A-Za-z0-9._-]", "_", name.strip())
    return slug or UNKNOWN_PROGRAM


def is_result_folder(folder: Path) -> bool:
    return (folder / RESULT_FOLDER_MARK).exists()


class ResultFolders:
    """Hands out the result folder of one execution of `program_name`."""

    def __init__(
        self,
        program_name: str,
        pool: Path | str | None = None,
        working_dir: Path | str | None = None,
    ) -> None:
        self.program_name = sanitize_program_name(program_name)
        self.pool = Path(pool) if pool is not None else Settings.from_env().results_dir
        self.working_dir = Path(working_dir) if working_dir is not None else Path.cwd()
        self._result_folder: Path | None = None

    def get_result_folder(self) -> Path:
        """The folder of this execution, created on first use."""
        if self._result_folder is not None:
            return self._result_folder
        if is_result_folder(self.working_dir):
            logger.info(f"Reusing result folder {self.working_dir}")
            self._result_folder = self.working_dir
        else:
            self._result_folder = self._init_result_folder()
        return self._result_folder

    def get_file_in_result_folder(self, file_name: str) -> Path:
        return self.get_result_folder() / file_name

    def get_folder_in_result_folder(self, folder_name: str) -> Path:
        folder = self.get_file_in_result_folder(folder_name)
        folder.mkdir(parents=True, exist_ok=True)
        return folder

    def _init_result_folder(self) -> Path:
        pool = self._get_pool_folder()
        result = self._create_result_folder(pool)
        self._refresh_latest_link(pool, result)
        logger.info(f"Created result folder {result}")
        return result

    def _get_pool_folder(self) -> Path:
        pool = self.pool
        if not pool.is_absolute():
            pool = self.working_dir / pool
        if pool.exists() and not pool.is_dir():
            raise NotADirectoryError(f"Results pool {pool} is not a directory")
        pool.mkdir(parents=True, exist_ok=True)
        return pool

    def _create_result_folder(self, pool: Path) -> Path:
        name = f"{self.program_name}-{generate_unique_id()}.exec"
        result = pool / ALL_FOLDER / name
        (result / RESULT_FOLDER_MARK).mkdir(parents=True)
        logger.debug(f"Marked {result} as a result folder")
        return result

    def _refresh_latest_link(self, pool: Path, result: Path) -> None:
        link = pool / LATEST_LINK
        try:
            # A dangling symlink does not "exist", so check both
            if link.is_symlink() or link.exists():
                link.unlink()
            link.symlink_to(result.resolve(), target_is_directory=True)
        except OSError as e:
            logger.warning(f"Could not point {link} to {result}: {e}")


if __name__ == "__main__":
    configure_logging()
    program = sys.argv[1] if len(sys.argv) > 1 else "briefcount.results"
    print(ResultFolders(program).get_result_folder())
