"""
assets.py: Concurrent image loading with a single "all ready" signal.

Loader threads only produce results; they are handed to the game through a
queue that the main loop drains with poll(), so every callback and every
write to the store happens on the loop's thread.
"""

import logging
import os
import queue
import threading
from typing import Any, Callable, Dict, Optional, Set

import pygame

from .constants import ASSET_DIR, IMAGE_FILES, OPTIONAL_IMAGE_FILES

logger = logging.getLogger(__name__)


def resolve_asset_path(filename: str, asset_dir: str = ASSET_DIR) -> str:
    """Looks in the asset directory first, then the working directory."""
    path = os.path.join(asset_dir, filename)
    if os.path.exists(path):
        return path
    if os.path.exists(filename):
        return filename
    # Returned anyway so the loader fails with a clear error
    return path


class AssetStore:
    """Named image handles, populated once at startup."""

    def __init__(self, files: Optional[Dict[str, str]] = None,
                 optional_files: Optional[Dict[str, str]] = None,
                 asset_dir: str = ASSET_DIR,
                 loader: Callable[[str], Any] = pygame.image.load,
                 on_ready: Optional[Callable[[], None]] = None):
        self.files = dict(IMAGE_FILES if files is None else files)
        self.optional_files = dict(OPTIONAL_IMAGE_FILES if optional_files is None else optional_files)
        self.asset_dir = asset_dir
        self.loader = loader
        self.on_ready = on_ready

        self.images: Dict[str, Any] = {}
        self.loaded = 0
        self.failed: Set[str] = set()

        self._results: "queue.Queue[tuple]" = queue.Queue()
        self._pending = 0
        self._started = False
        self._ready_fired = False

    @property
    def required(self) -> int:
        return len(self.files)

    @property
    def ready(self) -> bool:
        return self.loaded == self.required

    @property
    def settled(self) -> bool:
        """Every required image has either loaded or failed."""
        return self.loaded + len(self.failed) == self.required

    def get(self, name: str) -> Optional[Any]:
        return self.images.get(name)

    def start(self):
        """Starts one loader thread per image and returns immediately."""
        if self._started:
            raise RuntimeError("AssetStore.start() called twice")
        self._started = True

        entries = list(self.files.items()) + list(self.optional_files.items())
        self._pending = len(entries)
        for name, filename in entries:
            path = resolve_asset_path(filename, self.asset_dir)
            threading.Thread(target=self._load, args=(name, path),
                             name=f"asset-{name}", daemon=True).start()

        if self.required == 0:
            self._check_ready()

    def _load(self, name: str, path: str):
        try:
            result = self.loader(path)
        except (pygame.error, OSError) as e:
            self._results.put((name, path, None, e))
        else:
            self._results.put((name, path, result, None))

    def poll(self) -> int:
        """Handles every finished load without blocking. Returns how many."""
        handled = 0
        while True:
            try:
                item = self._results.get_nowait()
            except queue.Empty:
                return handled
            self._handle(*item)
            handled += 1

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Blocks until every started load has been handled."""
        while self._pending:
            try:
                item = self._results.get(timeout=timeout)
            except queue.Empty:
                return False
            self._handle(*item)
        return True

    def _handle(self, name: str, path: str, image: Any, error: Optional[Exception]):
        self._pending -= 1
        optional = name not in self.files

        if error is not None:
            if optional:
                logger.debug("Optional asset %s not loaded: %s", path, error)
            else:
                self.failed.add(name)
                logger.error("Failed to load asset %s. Make sure the file exists "
                             "and the path is correct. (%s)", path, error)
            return

        self.images[name] = image
        if optional:
            logger.debug("Loaded optional %s", name)
            return

        self.loaded += 1
        logger.debug("Loaded %s (%d/%d)", name, self.loaded, self.required)
        self._check_ready()

    def _check_ready(self):
        if self.ready and not self._ready_fired:
            self._ready_fired = True
            logger.info("All images loaded.")
            if self.on_ready:
                self.on_ready()
