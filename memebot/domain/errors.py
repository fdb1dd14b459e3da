# memebot/domain/errors.py
from __future__ import annotations


class MemeError(Exception):
    """Base class for failures the service reports to its caller."""


class TemplateNotFound(MemeError):
    def __init__(self, template: str):
        super().__init__(f"Template not found: {template!r}")
        self.template = template


class ImageProcessingError(MemeError):
    pass


class DeliveryError(MemeError):
    pass
