from __future__ import annotations

from pathlib import Path
from typing import Union

from ..config import COPY_MARKER


class OutputPathRepository:
    """
    Picks where a recolored copy goes so nothing on disk is overwritten.

    `photo.png` → `photo_copy.png`, then `photo_copy_1.png`, `photo_copy_2.png`, …
    """

    def __init__(self, marker: str = COPY_MARKER) -> None:
        self.marker = marker

    def _candidate(self, path: Path, number: int | None = None) -> Path:
        stem = path.stem + self.marker
        if number is not None:
            stem += f"_{number}"
        return path.with_name(stem + path.suffix)

    def resolve(self, input_path: Union[str, Path]) -> Path:
        input_path = Path(input_path)

        candidate = self._candidate(input_path)
        number = 1
        while candidate.exists():
            candidate = self._candidate(input_path, number)
            number += 1
        return candidate
