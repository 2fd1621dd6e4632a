# topmark:header:start
#
#   project      : SFDoc
#   file         : __init__.py
#   file_relpath : src/sfdoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc command-line interface: a file-system host for the SFDoc core."""
