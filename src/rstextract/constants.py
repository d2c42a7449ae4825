# topmark:header:start
#
#   project      : RstExtract
#   file         : constants.py
#   file_relpath : src/rstextract/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RstExtract Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

RSTEXTRACT_VERSION: str = get_version("rstextract")

# Token that flags a comment block as documentation payload (alone on its first line).
DEFAULT_MARKER: str = "+rst"

# Base name of the file that sorts right after the file named after the unit.
DOC_FILE_STEM: str = "doc"

DEFAULT_SOURCE_SUFFIX: str = ".go"
DEFAULT_OUTPUT_SUFFIX: str = ".rst"

# Configuration discovery (current working directory)
RSTEXTRACT_TOML_NAME: str = "rstextract.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "rstextract"

LOG_LEVEL_ENV_VAR: str = "RSTEXTRACT_LOG_LEVEL"

OUTPUT_DIR_MODE: int = 0o755
