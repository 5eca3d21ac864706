"""Named assets loaded from a directory of files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Generic, List, TypeVar, Union

log = logging.getLogger(__name__)

T = TypeVar("T")


class AssetStore(Generic[T]):
    """Maps file stems to assets produced by a loader function."""

    def __init__(self, loader: Callable[[Path], T]) -> None:
        self._loader = loader
        self._assets: Dict[str, T] = {}

    def load_directory(self, directory: Union[str, Path]) -> List[str]:
        """Load every regular file in the directory; return the names loaded."""
        loaded: List[str] = []
        try:
            entries = sorted(Path(directory).iterdir())
        except OSError as exc:
            log.error("Error occurred during file operation: %s", exc)
            return loaded
        for path in entries:
            if not path.is_file():
                continue
            name = path.stem
            self._assets.setdefault(name, self._loader(path))
            log.info("Loaded asset: %s", name)
            loaded.append(name)
        return loaded

    def get(self, name: str) -> T:
        try:
            return self._assets[name]
        except KeyError:
            raise KeyError(f"Could not find asset with name {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __len__(self) -> int:
        return len(self._assets)