import json
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from emojimap.async_thread import run_in_thread
from emojimap.logger import get_logger


logger = get_logger(__name__)

OUTPUT_FILENAME = "emoji-annotation-to-unicode.js"
OUTPUT_MODE = 0o644


def render_mapping(mapping: dict[str, str]) -> str:
    """Render an emoji map as a javascript module."""

    return f"module.exports = {json.dumps(mapping, indent=2, sort_keys=True)};\n"


@run_in_thread
def write_mapping(mapping: dict[str, str], path: str | Path = OUTPUT_FILENAME) -> None:
    """Atomically replace the file at the given path with the rendered emoji map."""

    path = Path(path)
    tmp = NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    )
    try:
        with tmp as file:
            file.write(render_mapping(mapping))
        # temporary files are created with mode 0600
        os.chmod(tmp.name, OUTPUT_MODE)
        os.replace(tmp.name, path)
    except Exception:
        os.unlink(tmp.name)
        raise

    logger.info("Wrote %d emojis to %s", len(mapping), path)
