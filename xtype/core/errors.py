"""Error types for the rendering engine.

Every failure in the engine is non-fatal by default: it is logged as a
warning and the operation continues with a degenerate result. Registries
created with ``strict=True`` raise the matching exception instead.
"""

import logging


class XTypeError(Exception):
    """Base class for engine errors."""


class DuplicateTypeError(XTypeError):
    """A type tag was registered twice."""


class UnknownTypeError(XTypeError):
    """A type tag has no registered factory."""


class DuplicateObjectError(XTypeError):
    """A (scope, id) key is already occupied."""


class UnknownObjectError(XTypeError):
    """No object is registered under a (scope, id) key."""


class InvalidConfigError(XTypeError):
    """A config is missing, empty or has no type tag."""


class RenderError(XTypeError):
    """A node cannot be rendered (no host, no tag)."""


def report(logger: logging.Logger, error: type[XTypeError], message: str, *args, strict: bool = False) -> None:
    """Log a warning, or raise ``error`` when ``strict`` is set."""
    if strict:
        raise error(message % args if args else message)
    logger.warning(message, *args)
