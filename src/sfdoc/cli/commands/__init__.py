# topmark:header:start
#
#   project      : SFDoc
#   file         : __init__.py
#   file_relpath : src/sfdoc/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the SFDoc CLI."""
