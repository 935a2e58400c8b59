"""Unit tests for the fragment cache."""

from unittest.mock import Mock

import pytest

from fontinjector.core.cache import FINGERPRINT_LENGTH, FragmentCache
from fontinjector.core.encoder import convert_font_to_fragment, fingerprint
from fontinjector.exceptions import CacheWriteError, FontNotFoundError, FontReadError

FONTS = ".obsidian/fonts"
CACHE = ".obsidian/plugins/custom-font"


@pytest.fixture
def encoder():
    return Mock(side_effect=convert_font_to_fragment)


@pytest.fixture
def cache(storage, encoder):
    return FragmentCache(storage, FONTS, CACHE, encoder=encoder)


class TestFragmentCache:
    """Tests for FragmentCache.load_or_convert."""

    def test_cache_path_is_deterministic(self, cache):
        """Same name and content map to the same entry."""
        digest = fingerprint(b"abc")
        assert cache.cache_path("A.ttf", digest) == cache.cache_path("A.ttf", digest)
        assert cache.cache_path("A.ttf", digest) == f"{CACHE}/A.ttf.{digest[:FINGERPRINT_LENGTH]}.css"

    def test_miss_encodes_and_writes(self, cache, storage, encoder):
        """First call encodes and persists the fragment."""
        fragment = cache.load_or_convert("MyFont.woff2")

        encoder.assert_called_once_with(b"\x00\x01\x02", "MyFont.woff2")
        path = cache.cache_path("MyFont.woff2", fragment.fingerprint)
        assert storage.files[path] == fragment.css
        assert CACHE in storage.dirs
        assert not fragment.cached
        assert cache.stats.misses == 1

    def test_second_call_uses_cache(self, cache, encoder):
        """Encoding happens at most once and both results are equal."""
        first = cache.load_or_convert("MyFont.woff2")
        second = cache.load_or_convert("MyFont.woff2")

        assert encoder.call_count == 1
        assert second == first
        assert second.cached
        assert second.css == first.css
        assert cache.stats.hits == 1
        assert cache.stats.hit_rate == 50.0

    def test_changed_content_invalidates(self, cache, storage, encoder):
        """New bytes under the same name are re-encoded and the old entry pruned."""
        first = cache.load_or_convert("MyFont.woff2")
        old_path = cache.cache_path("MyFont.woff2", first.fingerprint)

        storage.files[f"{FONTS}/MyFont.woff2"] = b"\x03\x04\x05"
        second = cache.load_or_convert("MyFont.woff2")

        assert encoder.call_count == 2
        assert second != first
        assert "AwQF" in second.css
        assert old_path not in storage.files
        assert cache.stats.pruned == 1

    def test_prune_keeps_other_fonts(self, cache, storage):
        """Pruning only touches entries of the same font."""
        storage.files[f"{FONTS}/Other.ttf"] = b"zz"
        other = cache.load_or_convert("Other.ttf")
        cache.load_or_convert("MyFont.woff2")

        assert cache.cache_path("Other.ttf", other.fingerprint) in storage.files

    def test_missing_font(self, cache):
        with pytest.raises(FontNotFoundError, match="Missing.ttf"):
            cache.load_or_convert("Missing.ttf")

    def test_read_failure(self, cache, storage):
        storage.failures["read_binary"] = PermissionError("denied")
        with pytest.raises(FontReadError, match="denied"):
            cache.load_or_convert("MyFont.woff2")

    def test_write_failure(self, cache, storage):
        storage.failures["write"] = OSError("disk full")
        with pytest.raises(CacheWriteError, match="disk full"):
            cache.load_or_convert("MyFont.woff2")

    def test_undecodable_cache_entry(self, cache, storage):
        """A corrupted cache entry surfaces as a read error."""
        path = cache.cache_path("MyFont.woff2", fingerprint(b"\x00\x01\x02"))
        storage.files[path] = b"\xff\xfe\xfa"

        with pytest.raises(FontReadError, match="MyFont.woff2"):
            cache.load_or_convert("MyFont.woff2")
