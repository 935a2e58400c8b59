"""Font conversion and injection engine.

This module coordinates a conversion pass: resolve the selected font(s),
load or encode their ``@font-face`` fragments, build the presentation
fragments and install everything into the style slots, then write the
rendered slots to the generated stylesheet file.

Every pass takes a generation number. A slot write from a pass whose
generation is no longer current is dropped and the pass stops, so a newer
selection always supersedes an older one still in flight.

Key classes:
- FontInjectionEngine: Owns the style registry and runs passes
"""

import structlog
from pydantic import ValidationError

from fontinjector.config import PathsConfig, PresentationConfig
from fontinjector.core.cache import FragmentCache
from fontinjector.core.presentation import build_presentation_fragment
from fontinjector.core.registry import StyleRegistry
from fontinjector.domain import (
    EncodedFontFragment,
    FontSelection,
    SelectionKind,
    SlotId,
    is_supported_font,
)
from fontinjector.exceptions import (
    CacheWriteError,
    ConfigError,
    FontInjectorError,
    NoValidFontsError,
    StorageError,
)
from fontinjector.host import Notifier, SettingsStore, Storage
from fontinjector.utils import PassLogger, PassStats


class PassSuperseded(Exception):
    """Raised inside a pass once a newer pass has started."""

    def __init__(self, generation: int, current: int) -> None:
        self.generation = generation
        self.current = current
        super().__init__(f"Pass {generation} superseded by pass {current}")


class FontInjectionEngine:
    """Applies the selected font(s) to the generated stylesheet.

    Example:
        storage = LocalStorage(vault_root)
        engine = FontInjectionEngine(
            storage=storage,
            notifier=ConsoleNotifier(),
            settings_store=JsonSettingsStore(storage, paths.settings_file),
            paths=paths,
        )
        engine.activate()
        engine.select_font("Vazirmatn.woff2")
    """

    def __init__(
        self,
        storage: Storage,
        notifier: Notifier,
        settings_store: SettingsStore,
        paths: PathsConfig | None = None,
        cache: FragmentCache | None = None,
        registry: StyleRegistry | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            storage: Vault storage for fonts, cache and stylesheet
            notifier: Receives one message per failed pass
            settings_store: Persists the presentation settings
            paths: Vault-relative locations (defaults to PathsConfig())
            cache: Fragment cache (built from paths if None)
            registry: Style slots (a fresh registry if None)
            logger: structlog logger (module logger if None)
        """
        self.paths = paths or PathsConfig()
        self.storage = storage
        self.notifier = notifier
        self.settings_store = settings_store
        self.cache = cache or FragmentCache(storage, self.paths.fonts_dir, self.paths.cache_dir)
        self.registry = registry or StyleRegistry()
        self.logger = logger or structlog.get_logger("fontinjector.engine")
        self.config = PresentationConfig()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Generation number of the most recently started pass."""
        return self._generation

    @property
    def selection(self) -> FontSelection:
        return FontSelection.parse(self.config.font)

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def activate(self) -> PassStats:
        """Load persisted settings and apply them (plugin activation)."""
        try:
            self.config = self.settings_store.load()
        except FontInjectorError as e:
            self.logger.error("Could not load settings", error=str(e))
            self.notifier.notify(str(e))
            self.config = PresentationConfig()
        return self.run_pass()

    def select_font(self, value: str) -> PassStats:
        """Change the selected font and apply the transition.

        ``value`` is a font file name or one of the "None"/"All" sentinels.
        Moving to "None" clears every slot without converting anything;
        moving between two different selections clears every slot before
        the new pass.

        Args:
            value: New setting value

        Returns:
            Statistics of the pass run for the new selection
        """
        previous = self.selection
        target = FontSelection.parse(value)
        self.config = self.config.model_copy(update={"font": target.to_setting()})
        self._save_settings()

        self.logger.info(
            "Font selection changed",
            previous=previous.to_setting(),
            selected=target.to_setting(),
        )

        if previous.kind != SelectionKind.NONE and previous != target:
            self.registry.clear_all()

        return self.run_pass()

    def update_config(self, **changes: object) -> PassStats:
        """Update presentation settings, persist them and re-apply.

        Args:
            **changes: PresentationConfig fields to change

        Raises:
            ConfigError: If a field is unknown or a value is invalid
        """
        unknown = set(changes) - set(PresentationConfig.model_fields)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")

        font = changes.pop("font", None)
        try:
            self.config = PresentationConfig.model_validate({**self.config.model_dump(), **changes})
        except ValidationError as e:
            raise ConfigError(str(e)) from e

        if font is not None:
            return self.select_font(str(font))

        self._save_settings()
        return self.run_pass()

    # ------------------------------------------------------------------
    # Pass
    # ------------------------------------------------------------------

    def run_pass(self) -> PassStats:
        """Run one conversion pass for the current settings.

        Errors are caught here, logged and surfaced as a single notification;
        the pass stops without rolling back slots it already wrote.

        Returns:
            PassStats for the pass
        """
        self._generation += 1
        generation = self._generation
        pass_logger = PassLogger(self.logger, generation)
        selection = self.selection

        try:
            if selection.kind == SelectionKind.NONE:
                self._check_current(generation)
                self.registry.clear_all()
            elif selection.kind == SelectionKind.SINGLE:
                self._apply_single(selection.file_name or "", generation, pass_logger)
            else:
                self._apply_all(generation, pass_logger)

            self._write_stylesheet(generation)

        except PassSuperseded as e:
            pass_logger.log_superseded(e.current)
        except FontInjectorError as e:
            pass_logger.log_error(e, pass_logger.current_font)
            self.notifier.notify(str(e))

        return pass_logger.finish()

    def _apply_single(self, file_name: str, generation: int, pass_logger: PassLogger) -> None:
        pass_logger.log_font_start(file_name)
        fragment = self.cache.load_or_convert(file_name)
        self._log_fragment(file_name, fragment, pass_logger)

        self._set_slot(generation, fragment.css, SlotId.FONT_FACE)
        pass_logger.log_font_applied(fragment.family_name)

        self._install_presentation([fragment.family_name], generation)

    def _apply_all(self, generation: int, pass_logger: PassLogger) -> None:
        file_names = self.discover_fonts(pass_logger)
        families: list[str] = []

        for index, file_name in enumerate(file_names):
            pass_logger.log_font_start(file_name)
            fragment = self.cache.load_or_convert(file_name)
            self._log_fragment(file_name, fragment, pass_logger)

            # First font replaces whatever an earlier pass left behind
            self._set_slot(generation, fragment.css, SlotId.FONT_FACE, append_mode=index > 0)
            pass_logger.log_font_applied(fragment.family_name)

            if fragment.family_name in families:
                self.logger.warning(
                    "Duplicate family name in font directory",
                    font=file_name,
                    family=fragment.family_name,
                )
                continue
            families.append(fragment.family_name)

        self._install_presentation(families, generation)

    def discover_fonts(self, pass_logger: PassLogger | None = None) -> list[str]:
        """List supported font files in the font directory, sorted by name.

        Raises:
            StorageError: If the directory cannot be listed
            NoValidFontsError: If it holds no supported font file
        """
        fonts_dir = self.paths.fonts_dir
        try:
            entries = self.storage.list_dir(fonts_dir)
        except OSError as e:
            raise StorageError(fonts_dir, str(e)) from e

        names: list[str] = []
        for entry in entries:
            name = entry.rstrip("/").rpartition("/")[2]
            if is_supported_font(name):
                names.append(name)
            elif pass_logger is not None:
                pass_logger.log_font_skipped(name, "unsupported extension")

        if not names:
            raise NoValidFontsError(
                [entry.rpartition("/")[2] for entry in entries],
                message=f"No font files found in '{fonts_dir}'",
            )

        # Listing order differs between filesystems
        return sorted(names, key=lambda n: (n.casefold(), n))

    def _install_presentation(self, families: list[str], generation: int) -> None:
        fragments = build_presentation_fragment(families, self.config)
        self._set_slot(generation, fragments.general_css, SlotId.GENERAL)
        if self.config.force_mode:
            self._set_slot(generation, fragments.force_css, SlotId.FORCE)
        else:
            self._check_current(generation)
            self.registry.clear(SlotId.FORCE)

    def _log_fragment(
        self,
        file_name: str,
        fragment: EncodedFontFragment,
        pass_logger: PassLogger,
    ) -> None:
        if fragment.cached:
            pass_logger.log_cache_hit(file_name, self.cache.cache_path(file_name, fragment.fingerprint))
        else:
            pass_logger.log_font_converted(file_name, fragment.family_name, len(fragment.css))

    # ------------------------------------------------------------------
    # Slot and file writes
    # ------------------------------------------------------------------

    def _check_current(self, generation: int) -> None:
        if generation != self._generation:
            raise PassSuperseded(generation, self._generation)

    def _set_slot(
        self,
        generation: int,
        text: str,
        slot_id: SlotId,
        append_mode: bool = False,
    ) -> None:
        self._check_current(generation)
        self.registry.apply_style(text, slot_id, append_mode=append_mode)

    def _write_stylesheet(self, generation: int) -> None:
        """Write the rendered slots to the generated stylesheet file.

        Raises:
            CacheWriteError: If the file cannot be written
        """
        self._check_current(generation)
        path = self.paths.stylesheet_file
        parent = path.rpartition("/")[0]
        try:
            if parent:
                self.storage.mkdir(parent)
            self.storage.write(path, self.registry.render())
        except OSError as e:
            raise CacheWriteError(path, str(e)) from e
        self.logger.debug("Stylesheet written", path=path)

    def _save_settings(self) -> None:
        try:
            self.settings_store.save(self.config)
        except FontInjectorError as e:
            self.logger.error("Could not save settings", error=str(e))
            self.notifier.notify(str(e))
