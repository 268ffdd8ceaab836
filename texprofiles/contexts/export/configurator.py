"""
Export Profile Configurator

Single entry point activating the report and book profiles on a host:
registers both profile records and attaches the pre-export steps in their
fixed order.

    1. inject_macros     macro definitions
    2. sync_assets       .sty/.cls files beside the document
    3. inject_skeleton   starter template body

Usage:
    from texprofiles import setup_export_profiles, Document

    host = setup_export_profiles()
    document = Document.from_file(Path("thesis.org"))
    host.run_before_export(document, backend="latex")
"""

from functools import partial
from typing import Optional

from texprofiles.config import ExportConfig, load_config
from texprofiles.contexts.export.asset_sync import sync_assets
from texprofiles.contexts.export.host import ExportHost
from texprofiles.contexts.export.logger import _log_debug
from texprofiles.contexts.export.macro_injector import inject_macros
from texprofiles.contexts.export.skeleton_injector import inject_skeleton
from texprofiles.contexts.profiles.class_registry import register_profiles

HOOK_ORDER = ("inject_macros", "sync_assets", "inject_skeleton")


def setup_export_profiles(
    host: Optional[ExportHost] = None, config: Optional[ExportConfig] = None
) -> ExportHost:
    """
    Register the export profiles and attach the pre-export steps.

    Safe to call repeatedly on the same host: profiles are insert-if-absent and
    hooks are keyed by name, so nothing is registered twice.

    Args:
        host: Host to configure (a fresh ExportHost if omitted)
        config: Paths for the steps (load_config() if omitted)

    Returns:
        The configured host
    """
    if host is None:
        host = ExportHost()
    if config is None:
        config = load_config()

    inserted = register_profiles(host.class_table)
    _log_debug(f"Profiles registered: {inserted or 'none new'}")

    hooks = {
        "inject_macros": partial(inject_macros, macro_file=config.macro_file),
        "sync_assets": partial(sync_assets, template_dir=config.template_dir),
        "inject_skeleton": partial(inject_skeleton, skeleton_files=config.skeleton_files),
    }
    for name in HOOK_ORDER:
        host.add_before_export_hook(name, hooks[name])

    return host
