# topmark:header:start
#
#   project      : SFDoc
#   file         : __init__.py
#   file_relpath : src/sfdoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SFDoc package.

SFDoc maintains a standardized comment header at the top of Salesforce source
files (Apex, Visualforce and Lightning component bundles). It inserts the header
on the first eligible save, rewrites the "Last Modified" fields on later saves,
and keeps the user's cursor where it was across the save-triggered edit.
"""

from __future__ import annotations
