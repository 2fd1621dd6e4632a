# topmark:header:start
#
#   project      : SFDoc
#   file         : xml.py
#   file_relpath : src/sfdoc/templates/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header template for XML/HTML comments: ``<!-- ... -->`` with indented lines."""

from __future__ import annotations

from sfdoc.filetypes.base import CommentStyle
from sfdoc.templates.base import HeaderTemplate
from sfdoc.templates.registry import register_template


@register_template("visualforce")
@register_template("html")
class XmlCommentTemplate(HeaderTemplate):
    """Template for Visualforce and Lightning markup headers."""

    comment_style = CommentStyle.XML

    def __init__(self) -> None:
        super().__init__(
            block_prefix="<!--",
            block_suffix="-->",
            line_prefix="  ",
            rule_prefix="  ",
        )
