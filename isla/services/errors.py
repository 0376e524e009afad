"""Exceptions raised by Isla's icon pipeline."""


class IconRenderError(Exception):
    """Raised when painting or encoding an icon fails.

    Rendering is deterministic, so this always points at a defect rather than
    bad input and is never retried.
    """
    pass
