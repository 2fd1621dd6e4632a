# topmark:header:start
#
#   project      : SFDoc
#   file         : __init__.py
#   file_relpath : src/sfdoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc configuration.

Build configs with `MutableConfig` and `freeze()` them into an immutable
`Config` before handing them to the core. To tweak a frozen config, call
`Config.thaw()`, edit the builder, then freeze again.
"""

from __future__ import annotations

from sfdoc.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
