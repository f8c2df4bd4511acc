"""Exception classes for mdpreview.

Markdown input never raises: malformed blocks degrade into paragraphs or
literal text. These exceptions cover misuse of the Python API.
"""

from __future__ import annotations


class MdPreviewError(Exception):
    """Base exception for all mdpreview errors."""

    pass


class RenderError(MdPreviewError):
    """Error during HTML rendering.

    Raised when the renderer is handed an object that is not a block node,
    which only happens when callers assemble trees by hand.
    """

    def __init__(self, node: object, message: str = "cannot render node") -> None:
        """Initialize render error.

        Args:
            node: The offending object
            message: Description of the failure
        """
        self.node = node
        super().__init__(f"{message}: {type(node).__name__}")
