"""
Export Configuration

Resolves the paths the pre-export steps read from: the bundled template
directory (asset files and skeletons) and the macro file. Paths default to the
files shipped beside the installed package and can be overridden, in increasing
order of precedence, by environment variables (.env supported), a YAML config
file, and explicit keyword overrides.

Environment variables:
    TEXPROFILES_TEMPLATE_DIR     Directory holding .sty/.cls assets
    TEXPROFILES_MACRO_FILE       Macro definitions injected before export
    TEXPROFILES_REPORT_SKELETON  Starter template for the report profile
    TEXPROFILES_BOOK_SKELETON    Starter template for the book profile
    TEXPROFILES_CONFIG           Optional YAML config file

YAML layout:
    template_dir: path/to/templates
    macro_file: path/to/macros.org
    skeletons:
      report: path/to/report-skeleton.org
      book: path/to/book-skeleton.org
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_TEMPLATE_DIR = PACKAGE_ROOT / "templates"
DEFAULT_MACRO_FILE = PACKAGE_ROOT / "macros" / "latex-macros.org"
DEFAULT_SKELETON_FILES = {
    "report": DEFAULT_TEMPLATE_DIR / "report-skeleton.org",
    "book": DEFAULT_TEMPLATE_DIR / "book-skeleton.org",
}

SKELETON_ENV_VARS = {
    "report": "TEXPROFILES_REPORT_SKELETON",
    "book": "TEXPROFILES_BOOK_SKELETON",
}


@dataclass(frozen=True)
class ExportConfig:
    """
    Read-only paths used by the pre-export steps.

    Attributes:
        template_dir: Directory scanned for .sty/.cls assets
        macro_file: File prepended to documents declaring a known profile
        skeleton_files: Starter template per profile name
    """

    template_dir: Path = DEFAULT_TEMPLATE_DIR
    macro_file: Path = DEFAULT_MACRO_FILE
    skeleton_files: Mapping[str, Path] = field(
        default_factory=lambda: dict(DEFAULT_SKELETON_FILES)
    )


def _from_environment() -> Dict[str, Any]:
    values: Dict[str, Any] = {}

    template_dir = os.getenv("TEXPROFILES_TEMPLATE_DIR")
    if template_dir:
        values["template_dir"] = template_dir

    macro_file = os.getenv("TEXPROFILES_MACRO_FILE")
    if macro_file:
        values["macro_file"] = macro_file

    skeletons = {}
    for profile_name, env_var in SKELETON_ENV_VARS.items():
        skeleton = os.getenv(env_var)
        if skeleton:
            skeletons[profile_name] = skeleton
    if skeletons:
        values["skeletons"] = skeletons

    return values


def _from_yaml(config_path: Path) -> Dict[str, Any]:
    """
    Load a YAML config file.

    Raises:
        FileNotFoundError: If config_path doesn't exist
        ValueError: If the file has unknown top-level keys
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Export config not found at {config_path}")

    loaded = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}

    unknown = set(loaded) - {"template_dir", "macro_file", "skeletons"}
    if unknown:
        raise ValueError(
            f"Unknown keys in export config {config_path}: {sorted(unknown)}"
        )

    return loaded


def _stringify(values: Any) -> Any:
    # OmegaConf nodes hold plain strings; paths are rebuilt after merging
    if isinstance(values, Mapping):
        return {key: _stringify(value) for key, value in values.items()}
    if isinstance(values, Path):
        return str(values)
    return values


def load_config(config_path: Optional[Path] = None, **overrides: Any) -> ExportConfig:
    """
    Build an ExportConfig from defaults, environment, YAML and overrides.

    Args:
        config_path: Optional YAML config (defaults to TEXPROFILES_CONFIG if set)
        **overrides: template_dir, macro_file and/or skeletons ({profile: path})

    Returns:
        Resolved ExportConfig

    Examples:
        >>> config = load_config(template_dir=Path("my_templates"))
        >>> config = load_config(Path("texprofiles.yaml"))
    """
    layers = [_from_environment()]

    if config_path is None and os.getenv("TEXPROFILES_CONFIG"):
        config_path = Path(os.getenv("TEXPROFILES_CONFIG"))
    if config_path is not None:
        layers.append(_from_yaml(Path(config_path)))

    layers.append(_stringify({key: value for key, value in overrides.items() if value is not None}))

    merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)

    skeleton_files = dict(DEFAULT_SKELETON_FILES)
    for profile_name, skeleton in (merged.get("skeletons") or {}).items():
        skeleton_files[profile_name] = Path(skeleton)

    return ExportConfig(
        template_dir=Path(merged.get("template_dir", DEFAULT_TEMPLATE_DIR)),
        macro_file=Path(merged.get("macro_file", DEFAULT_MACRO_FILE)),
        skeleton_files=skeleton_files,
    )
