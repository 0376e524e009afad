"""
Shared pytest fixtures for Isla tests.

This module puts the project root and the isla bot directory on sys.path
(bots import their own modules as top-level `config`, `services`, `api`),
and provides the Flask test client plus helpers for taking PNG output apart.
"""
import struct
import sys
import zlib
from pathlib import Path

import pytest

# Add project root and isla to Python path for imports
project_root = Path(__file__).parent.parent
isla_path = project_root / 'isla'
for path in (project_root, isla_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


# ==============================================================================
# Flask Fixtures
# ==============================================================================

@pytest.fixture
def isla_app():
    """Isla Flask app with a fresh icon cache."""
    from app import app
    from services.icon_cache import IconCache

    app.config['TESTING'] = True
    original_cache = app.config['ICON_CACHE']
    app.config['ICON_CACHE'] = IconCache()

    yield app

    app.config['ICON_CACHE'] = original_cache


@pytest.fixture
def client(isla_app):
    """Create a test client for the Flask app."""
    with isla_app.test_client() as client:
        yield client


# ==============================================================================
# PNG Helpers
# ==============================================================================

def _read_chunks(png):
    """Split PNG bytes into (type, data, crc) tuples, skipping the signature."""
    chunks = []
    offset = 8
    while offset < len(png):
        length, = struct.unpack('>I', png[offset:offset + 4])
        chunk_type = png[offset + 4:offset + 8]
        data = png[offset + 8:offset + 8 + length]
        crc, = struct.unpack('>I', png[offset + 8 + length:offset + 12 + length])
        chunks.append((chunk_type, data, crc))
        offset += 12 + length
    return chunks


def _read_pixel(png, x, y):
    """Decode one RGBA pixel from a filter-None, single-IDAT PNG."""
    chunks = _read_chunks(png)
    width, = struct.unpack('>I', chunks[0][1][:4])
    raw = zlib.decompress(b''.join(data for kind, data, _ in chunks if kind == b'IDAT'))
    idx = y * (width * 4 + 1) + 1 + x * 4
    return tuple(raw[idx:idx + 4])


@pytest.fixture
def png_chunks():
    """Function that splits PNG bytes into (type, data, crc) tuples."""
    return _read_chunks


@pytest.fixture
def png_pixel():
    """Function that reads the RGBA value at (x, y) from PNG bytes."""
    return _read_pixel
