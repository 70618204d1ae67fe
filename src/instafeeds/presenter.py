"""
Two-section list screen for the decoded feeds.

Section 0 is "InstaCats", section 1 is "InstaDogs". Each section's records are
replaced wholesale on every load; there is no merge. Replacement and rendering
are expected to happen on the same event loop (see pipeline.run_feeds).
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .models import CatRecord, DogRecord

CATS_SECTION = 0
DOGS_SECTION = 1
SECTION_TITLES = ("InstaCats", "InstaDogs")

@dataclass(frozen=True)
class Row:
    title: str
    detail: str
    image: Optional[Path] = None

def resolve_image(image_name: str, assets_dir: Optional[Union[str, Path]]) -> Optional[Path]:
    """Path of a bundled image asset, or None if there's no assets dir or no such file."""
    if not assets_dir or not image_name:
        return None
    path = Path(assets_dir) / image_name
    return path if path.is_file() else None

class FeedScreen:

    def __init__(self, assets_dir: Optional[Union[str, Path]] = None):
        self.assets_dir = assets_dir
        self.cats: List[CatRecord] = []
        self.dogs: List[DogRecord] = []

    def replace_cats(self, records: Iterable[CatRecord]) -> None:
        self.cats = list(records)

    def replace_dogs(self, records: Iterable[DogRecord]) -> None:
        self.dogs = list(records)

    def section_count(self) -> int:
        return len(SECTION_TITLES)

    def section_title(self, section: int) -> str:
        return SECTION_TITLES[CATS_SECTION] if section == CATS_SECTION else SECTION_TITLES[DOGS_SECTION]

    def row_count(self, section: int) -> int:
        return len(self.cats) if section == CATS_SECTION else len(self.dogs)

    def row(self, section: int, index: int) -> Row:
        if section == CATS_SECTION:
            cat = self.cats[index]
            return Row(title=cat.name, detail=cat.description)
        dog = self.dogs[index]
        return Row(
            title=dog.name,
            detail=dog.formatted_stats(),
            image=resolve_image(dog.image_name, self.assets_dir),
        )

    def render(self) -> str:
        """Plain-text rendering of both sections, one line per row."""
        lines: List[str] = []
        for section in range(self.section_count()):
            lines.append(f"== {self.section_title(section)} ({self.row_count(section)}) ==")
            for i in range(self.row_count(section)):
                r = self.row(section, i)
                line = f"  {r.title} | {r.detail}"
                if r.image is not None:
                    line += f" [{r.image.name}]"
                lines.append(line)
        return "\n".join(lines)
