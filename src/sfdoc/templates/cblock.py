# topmark:header:start
#
#   project      : SFDoc
#   file         : cblock.py
#   file_relpath : src/sfdoc/templates/cblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header template for C-style block comments: ``/** ... **/`` with per-line ``*``.

Layout:

/**
 * @File Name          : AccountService.cls
 * ...
 *==============================================================================
 * 1.0    01-31-2025, 09:15:00 AM  jdoe                  Initial Version
**/
"""

from __future__ import annotations

from sfdoc.filetypes.base import CommentStyle
from sfdoc.templates.base import HeaderTemplate
from sfdoc.templates.registry import register_template


@register_template("apex")
@register_template("javascript")
class BlockCommentTemplate(HeaderTemplate):
    """Template for Apex and Lightning JavaScript headers."""

    comment_style = CommentStyle.BLOCK

    def __init__(self) -> None:
        super().__init__(
            block_prefix="/**",
            block_suffix="**/",
            line_prefix=" * ",
            rule_prefix=" *",
        )
