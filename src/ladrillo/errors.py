"""Exception classes for Ladrillo.

Node constructors never raise. Errors surface only at render time, when the
renderer meets something it cannot serialize.
"""

from __future__ import annotations

from typing import Literal


class LadrilloError(Exception):
    """Base exception for all Ladrillo errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(LadrilloError):
    """Error during HTML rendering.

    Raised when the renderer encounters an object that is not a node,
    such as a bare string passed where ``text()`` was intended.
    """

    def __init__(self, message: str, node: object = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending object, if any
        """
        self.message = message
        self.node = node
        super().__init__(message)


class InvalidNameError(RenderError):
    """Element or attribute name that cannot appear in markup.

    Only raised when name validation is enabled in RenderConfig.
    """

    def __init__(self, name: str, kind: Literal["element", "attribute"]) -> None:
        """Initialize invalid name error.

        Args:
            name: The rejected name
            kind: Whether the name belongs to an element or an attribute
        """
        self.name = name
        self.kind = kind
        super().__init__(f"Invalid {kind} name: {name!r}")
