# topmark:header:start
#
#   project      : SFDoc
#   file         : __main__.py
#   file_relpath : src/sfdoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m sfdoc``."""

from __future__ import annotations

from sfdoc.cli.main import cli

if __name__ == "__main__":
    cli()
