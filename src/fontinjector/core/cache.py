"""On-storage cache of encoded ``@font-face`` fragments.

Encoding a font to base64 is the expensive step of a pass, so fragments are
written next to the plugin data and read back on later runs. Cache entries
are keyed by the font's file name plus a fingerprint of its bytes, which
invalidates an entry as soon as the file content changes.

Key classes:
- CacheStats: Hit/miss counters
- FragmentCache: Existence-gated memoization of convert_font_to_fragment
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from fontinjector.core.encoder import convert_font_to_fragment, fingerprint
from fontinjector.domain import EncodedFontFragment, FontAsset
from fontinjector.exceptions import CacheWriteError, FontNotFoundError, FontReadError
from fontinjector.host.storage import Storage

logger = structlog.get_logger("fontinjector.cache")

# Characters of the fingerprint kept in the cache file name
FINGERPRINT_LENGTH = 16
CACHE_SUFFIX = ".css"

Encoder = Callable[[bytes, str], EncodedFontFragment]


@dataclass
class CacheStats:
    """Statistics for fragment cache lookups."""

    hits: int = 0
    misses: int = 0
    pruned: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100.0) if total > 0 else 0.0


class FragmentCache:
    """Loads fonts from the font directory and caches their fragments.

    Example:
        cache = FragmentCache(storage, ".obsidian/fonts", ".obsidian/plugins/custom-font")
        fragment = cache.load_or_convert("Vazirmatn.woff2")
    """

    def __init__(
        self,
        storage: Storage,
        fonts_dir: str,
        cache_dir: str,
        encoder: Encoder = convert_font_to_fragment,
    ) -> None:
        """Initialize the cache.

        Args:
            storage: Storage the fonts and cache entries live in
            fonts_dir: Directory holding the font files
            cache_dir: Directory cache entries are written to
            encoder: Conversion function, called on cache misses only
        """
        self._storage = storage
        self._fonts_dir = fonts_dir.rstrip("/")
        self._cache_dir = cache_dir.rstrip("/")
        self._encoder = encoder
        self.stats = CacheStats()

    def font_path(self, font_file_name: str) -> str:
        """Path of a font inside the font directory."""
        return f"{self._fonts_dir}/{font_file_name}"

    def cache_path(self, font_file_name: str, digest: str) -> str:
        """Deterministic cache path for a font name and content fingerprint."""
        return f"{self._cache_dir}/{font_file_name}.{digest[:FINGERPRINT_LENGTH]}{CACHE_SUFFIX}"

    def read_font(self, font_file_name: str) -> bytes:
        """Read a font's bytes from the font directory.

        Raises:
            FontNotFoundError: If the font is not in the font directory
            FontReadError: If the binary read fails
        """
        path = self.font_path(font_file_name)
        if not self._storage.exists(path):
            raise FontNotFoundError(path)
        try:
            return self._storage.read_binary(path)
        except OSError as e:
            raise FontReadError(path, str(e)) from e

    def load_or_convert(self, font_file_name: str) -> EncodedFontFragment:
        """Return the fragment for a font, encoding it only on a cache miss.

        Args:
            font_file_name: File name inside the font directory

        Returns:
            EncodedFontFragment; ``cached`` is True when read from the cache

        Raises:
            FontNotFoundError: If the font is not in the font directory
            FontReadError: If the font or the cache entry cannot be read
            CacheWriteError: If a new cache entry cannot be written
        """
        data = self.read_font(font_file_name)
        digest = fingerprint(data)
        path = self.cache_path(font_file_name, digest)
        asset = FontAsset(font_file_name)

        if self._storage.exists(path):
            try:
                css = self._storage.read(path)
            except (OSError, UnicodeDecodeError) as e:
                raise FontReadError(path, str(e)) from e
            self.stats.hits += 1
            logger.debug("Cache hit", font=font_file_name, path=path)
            return EncodedFontFragment(
                family_name=asset.family_name,
                mime_type=asset.mime_type,
                css=css,
                fingerprint=digest,
                cached=True,
            )

        self.stats.misses += 1
        fragment = self._encoder(data, font_file_name)

        try:
            self._storage.mkdir(self._cache_dir)
            self._storage.write(path, fragment.css)
        except OSError as e:
            raise CacheWriteError(path, str(e)) from e

        logger.debug("Cache entry written", font=font_file_name, path=path)
        self._prune(font_file_name, keep=path)
        return fragment

    def _prune(self, font_file_name: str, keep: str) -> None:
        """Remove entries of the same font left behind by older content."""
        prefix = f"{self._cache_dir}/{font_file_name}."
        try:
            entries = self._storage.list_dir(self._cache_dir)
        except OSError as e:
            logger.warning("Could not list cache directory", path=self._cache_dir, error=str(e))
            return

        for entry in entries:
            if entry == keep or not entry.startswith(prefix) or not entry.endswith(CACHE_SUFFIX):
                continue
            digest_part = entry[len(prefix) : -len(CACHE_SUFFIX)]
            if len(digest_part) != FINGERPRINT_LENGTH:
                continue
            try:
                self._storage.remove(entry)
            except OSError as e:
                logger.warning("Could not prune cache entry", path=entry, error=str(e))
                continue
            self.stats.pruned += 1
            logger.debug("Stale cache entry pruned", path=entry)
