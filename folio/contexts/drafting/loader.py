"""
Draft file loading.

Reads a stored draft from disk and hands the raw structure to the normalizer.
Storage itself is owned elsewhere; this adapter only understands the two file
formats drafts are exported in:
- .json (the editor's native export)
- .yaml / .yml (hand-written drafts)
"""

import json
from pathlib import Path
from typing import Any

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from folio.contexts.drafting.draft_data_structure import Draft
from folio.contexts.drafting.logger import log_draft_loaded
from folio.contexts.drafting.normalizer import normalize_draft

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


class UnsupportedDraftFormatError(ValueError):
    """Raised when a draft file has an extension the loader does not read."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"Unsupported draft format '{path.suffix}' for {path}. "
            f"Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )


class InvalidDraftFileError(ValueError):
    """Raised when a YAML draft file cannot be parsed."""

    def __init__(self, path: Path, original_error: Exception):
        self.path = path
        self.original_error = original_error
        super().__init__(f"Could not parse draft file {path}: {original_error}")


def load_raw_draft(path: Path) -> Any:
    """
    Load a draft file without normalizing it.

    Args:
        path: Path to a .json, .yaml or .yml draft file

    Returns:
        Plain Python structure (dicts, lists, scalars) as stored

    Raises:
        FileNotFoundError: If path does not exist
        UnsupportedDraftFormatError: If the extension is not supported
        json.JSONDecodeError: If a .json file is not valid JSON
        InvalidDraftFileError: If a YAML file cannot be parsed
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Draft file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedDraftFormatError(path)

    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))

    try:
        config = OmegaConf.load(path)
        # Draft text is display data; "${...}" must not be read as interpolation
        return OmegaConf.to_container(config, resolve=False)
    except (YAMLError, OmegaConfBaseException, ValueError) as e:
        raise InvalidDraftFileError(path, e) from e


def load_draft(path: Path) -> Draft:
    """
    Load a draft file and normalize it.

    Args:
        path: Path to a .json, .yaml or .yml draft file

    Returns:
        Normalized Draft

    Raises:
        Same as load_raw_draft()
    """
    path = Path(path)
    draft = normalize_draft(load_raw_draft(path))
    log_draft_loaded(path, draft)
    return draft
