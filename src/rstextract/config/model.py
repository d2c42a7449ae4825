# topmark:header:start
#
#   project      : RstExtract
#   file         : model.py
#   file_relpath : src/rstextract/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot passed to the extraction driver.
    - `MutableConfig`: a mutable builder used while layering defaults, config
      files and CLI options; it can be frozen into `Config` and thawed back.

Precedence (lowest to highest):
    built-in defaults < discovered config file (``rstextract.toml`` or
    ``pyproject.toml`` in the working directory) < explicit ``--config`` file <
    CLI options.

Path semantics:
    - ``source_dir`` / ``output_dir`` declared in a config file are resolved
      against that file's directory.
    - CLI paths are taken as given (relative to the invocation CWD).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rstextract.config.loaders import (
    discover_config_file,
    extract_config_table,
    get_bool_value_or_none,
    get_list_value,
    get_path_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from rstextract.config.logging import get_logger
from rstextract.config.types import ErrorPolicy
from rstextract.constants import DEFAULT_MARKER, DEFAULT_OUTPUT_SUFFIX, DEFAULT_SOURCE_SUFFIX
from rstextract.errors import ConfigError

if TYPE_CHECKING:
    from rstextract.config.logging import RstExtractLogger
    from rstextract.config.types import ArgsLike, TomlTable

logger: RstExtractLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one extraction run.

    Attributes:
        source_dir (Path | None): Directory holding the source files.
        output_dir (Path | None): Directory receiving one document per unit.
        marker (str): Token flagging a comment block as documentation.
        source_suffix (str): Suffix of the source files to read (``.go``).
        output_suffix (str): Suffix of the generated documents (``.rst``).
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of source
            files to skip, matched relative to ``source_dir``.
        error_policy (ErrorPolicy): Behavior when one output document cannot be written.
        dry_run (bool): Report what would be written without touching the output directory.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    source_dir: Path | None
    output_dir: Path | None
    marker: str
    source_suffix: str
    output_suffix: str
    exclude_patterns: tuple[str, ...]
    error_policy: ErrorPolicy
    dry_run: bool
    config_files: tuple[Path, ...]

    def output_path_for(self, unit_name: str) -> Path:
        """Return the output document path for the unit called ``unit_name``."""
        if self.output_dir is None:
            raise ConfigError("No output directory configured")
        return self.output_dir / f"{unit_name}{self.output_suffix}"

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            source_dir=self.source_dir,
            output_dir=self.output_dir,
            marker=self.marker,
            source_suffix=self.source_suffix,
            output_suffix=self.output_suffix,
            exclude_patterns=list(self.exclude_patterns),
            error_policy=self.error_policy,
            dry_run=self.dry_run,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while layering config sources.

    Attributes mirror `Config`; lists replace tuples so that layers can extend them.
    """

    source_dir: Path | None = None
    output_dir: Path | None = None
    marker: str = DEFAULT_MARKER
    source_suffix: str = DEFAULT_SOURCE_SUFFIX
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    dry_run: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable Config.

        Raises:
            ConfigError: If the marker or a suffix is unusable.
        """
        self.validate()
        return Config(
            source_dir=self.source_dir,
            output_dir=self.output_dir,
            marker=self.marker,
            source_suffix=self.source_suffix,
            output_suffix=self.output_suffix,
            exclude_patterns=tuple(self.exclude_patterns),
            error_policy=self.error_policy,
            dry_run=self.dry_run,
            config_files=tuple(self.config_files),
        )

    def validate(self) -> None:
        """Check field values that no loader can guarantee.

        The marker is compared against a whitespace-stripped first line, so it
        must be non-empty and free of whitespace to ever match.

        Raises:
            ConfigError: On an empty or whitespace-bearing marker, or an empty source suffix.
        """
        if not self.marker or any(ch.isspace() for ch in self.marker):
            raise ConfigError(f"Invalid marker {self.marker!r}: must be a non-empty word")
        if not self.source_suffix:
            raise ConfigError("Source suffix must not be empty")

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def apply_toml_dict(self, table: TomlTable, *, config_file: Path | None = None) -> None:
        """Overlay the values of an RstExtract config table.

        Recognized keys: ``source_dir``, ``output_dir``, ``marker``, ``source_suffix``,
        ``output_suffix``, ``exclude`` (list), ``error_policy`` (``"fail-fast"`` or
        ``"keep-going"``) and ``dry_run``. Unknown keys are logged and ignored.

        Args:
            table (TomlTable): Parsed config table.
            config_file (Path | None): File the table came from; anchors relative paths.

        Raises:
            ConfigError: If a value has the wrong type or an unknown error policy.
        """
        known: set[str] = {
            "source_dir",
            "output_dir",
            "marker",
            "source_suffix",
            "output_suffix",
            "exclude",
            "error_policy",
            "dry_run",
        }
        for key in sorted(set(table) - known):
            logger.warning("Ignoring unknown config key '%s' in %s", key, config_file)

        source_dir: Path | None = get_path_value_or_none(table, "source_dir", config_file)
        if source_dir is not None:
            self.source_dir = source_dir
        output_dir: Path | None = get_path_value_or_none(table, "output_dir", config_file)
        if output_dir is not None:
            self.output_dir = output_dir

        for key in ("marker", "source_suffix", "output_suffix"):
            value: str | None = get_string_value_or_none(table, key, config_file)
            if value is not None:
                setattr(self, key, value)

        self.exclude_patterns.extend(get_list_value(table, "exclude", config_file))

        policy_name: str | None = get_string_value_or_none(table, "error_policy", config_file)
        if policy_name is not None:
            policy: ErrorPolicy | None = ErrorPolicy.from_name(policy_name)
            if policy is None:
                raise ConfigError(f"Unknown error_policy {policy_name!r}", path=config_file)
            self.error_policy = policy

        dry_run: bool | None = get_bool_value_or_none(table, "dry_run", config_file)
        if dry_run is not None:
            self.dry_run = dry_run

        if config_file is not None:
            self.config_files.append(config_file)

    def apply_toml_file(self, path: Path) -> None:
        """Overlay the RstExtract settings found in the TOML file at ``path``.

        Raises:
            ConfigError: If the file cannot be loaded, or is a ``pyproject.toml``
                without a ``[tool.rstextract]`` table.
        """
        logger.debug("Applying config file: %s", path)
        table: TomlTable | None = extract_config_table(load_toml_dict(path), path)
        if table is None:
            raise ConfigError("No [tool.rstextract] table", path=path)
        self.apply_toml_dict(table, config_file=path)

    def apply_args(self, args: ArgsLike) -> None:
        """Overlay CLI/API arguments; keys holding None (or empty) are left untouched.

        Recognized keys mirror the attribute names, with ``keep_going`` (bool)
        selecting `ErrorPolicy.KEEP_GOING`.
        """
        for key in ("marker", "source_suffix", "output_suffix"):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, str(value))
        for key in ("source_dir", "output_dir"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, Path(value))
        self.exclude_patterns.extend(args.get("exclude_patterns") or ())
        if args.get("keep_going"):
            self.error_policy = ErrorPolicy.KEEP_GOING
        if args.get("dry_run"):
            self.dry_run = True

    @classmethod
    def load_merged(
        cls,
        args: ArgsLike | None = None,
        *,
        cwd: Path | None = None,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a builder from defaults, config files and arguments.

        Args:
            args (ArgsLike | None): CLI/API overrides (see `apply_args`).
            cwd (Path | None): Directory searched for a config file (defaults to CWD).
            config_file (Path | None): Explicit config file applied after the discovered one.

        Returns:
            MutableConfig: The merged builder.
        """
        draft: MutableConfig = cls.from_defaults()
        discovered: Path | None = discover_config_file(cwd or Path.cwd())
        if discovered is not None:
            draft.apply_toml_file(discovered)
        if config_file is not None:
            draft.apply_toml_file(config_file)
        if args:
            draft.apply_args(args)
        logger.debug("Merged config: %s", draft)
        return draft
