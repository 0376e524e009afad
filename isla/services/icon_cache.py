"""
Icon generation with per-process memoization.

Rendering is a pure function of the icon name, so cached bytes never go
stale. The lock only protects the dict itself: two threads asking for the
same uncached icon may both render it, and both store identical bytes.
"""

import logging
import threading
import time
from typing import Dict, List, Optional

from services import registry
from services.errors import IconRenderError
from services.png_encoder import encode_png
from services.scene import paint_pixels

logger = logging.getLogger(__name__)


class IconCache:
    """Owns the rendered PNG bytes for the icon catalog."""

    def __init__(self):
        self._icons: Dict[str, bytes] = {}
        self._lock = threading.Lock()
        self._renders = 0

    def known(self, name: str) -> bool:
        return registry.known_icon(name)

    def names(self) -> List[str]:
        return registry.list_icon_names()

    def generate(self, name: str) -> Optional[bytes]:
        """
        Return the PNG bytes for `name`, rendering them on first use.

        Returns:
            PNG bytes, or None if the name is not in the catalog

        Raises:
            IconRenderError: If painting or encoding fails
        """
        spec = registry.get_icon_spec(name)
        if spec is None:
            return None

        with self._lock:
            cached = self._icons.get(name)
        if cached is not None:
            logger.debug(f"Icon cache hit: {name}")
            return cached

        png = self._render(name, spec)

        with self._lock:
            self._icons[name] = png
            self._renders += 1
        return png

    def _render(self, name, spec) -> bytes:
        start = time.time()
        try:
            canvas = paint_pixels(spec)
            png = encode_png(spec.size, spec.size, canvas.to_bytes())
        except IconRenderError:
            logger.exception(f"Failed to render icon {name}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error rendering icon {name}")
            raise IconRenderError(f"Failed to render icon {name}: {e}") from e

        duration_ms = (time.time() - start) * 1000
        logger.info(
            f"Rendered {name} ({spec.size}x{spec.size}) - "
            f"{len(png)} bytes in {duration_ms:.1f}ms"
        )
        return png

    def warm(self) -> int:
        """Render every catalog icon that is not cached yet. Returns how many were rendered."""
        rendered = 0
        for name in self.names():
            with self._lock:
                present = name in self._icons
            if not present:
                self.generate(name)
                rendered += 1
        return rendered

    def stats(self) -> dict:
        with self._lock:
            return {
                'known': len(registry.ICON_SPECS),
                'cached': len(self._icons),
                'renders': self._renders,
            }


# Default cache behind the module-level helpers
icon_cache = IconCache()


def known_icon(name: str) -> bool:
    return icon_cache.known(name)


def list_icon_names() -> List[str]:
    return icon_cache.names()


def generate_icon(name: str) -> Optional[bytes]:
    """PNG bytes for a catalog icon, or None for an unknown name."""
    return icon_cache.generate(name)
