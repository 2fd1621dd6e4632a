# topmark:header:start
#
#   project      : SFDoc
#   file         : __init__.py
#   file_relpath : src/sfdoc/templates/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header templates; importing a template module registers it."""

import importlib
import pkgutil
from pathlib import Path

from sfdoc.config.logging import get_logger

logger = get_logger(__name__)


def register_all_templates() -> None:
    """Import every module of this package so that templates register themselves."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"{__name__}.{module_info.name}")
