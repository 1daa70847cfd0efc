import asyncio
import logging
import os
from pathlib import Path
from typing import Dict, List, Union

from .errors import PathTraversalError, WriteError

logger = logging.getLogger(__name__)


def validate_filename(filename: str) -> None:
    """Reject anything that could land outside the output directory."""
    if not filename or ".." in filename or "/" in filename or "\\" in filename or os.sep in filename:
        raise PathTraversalError(filename)


def _write_file(file_path: Path, code: str) -> Path:
    file_path.write_text(code, encoding="utf-8")
    logger.info(f"📄 Wrote {file_path.name} ({file_path.stat().st_size} bytes)")
    return file_path


async def write_layout_files(files: Dict[str, str], output_dir: Union[str, Path]) -> List[Path]:
    """
    Write generated components to disk, overwriting files with the same name.

    Every filename is checked before anything is written, so a bad key fails
    the whole batch. Writes then run concurrently; if one fails the others
    are not rolled back.
    """
    for filename in files:
        validate_filename(filename)

    output_path = Path(output_dir)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"📁 Output directory: {output_path}")

        written = await asyncio.gather(*(
            asyncio.to_thread(_write_file, output_path / filename, code)
            for filename, code in files.items()
        ))
    except OSError as e:
        logger.error(f"❌ File writing error: {e}")
        raise WriteError(f"Failed to write files: {e}", path=str(getattr(e, "filename", "") or output_path)) from e

    logger.info(f"✅ Successfully wrote {len(written)} files")
    return list(written)
