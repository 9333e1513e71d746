"""Data models for eletract."""

from eletract.models.request import TYPESCRIPT_TEMPLATES, ProvisionRequest, TemplateFlavor

__all__ = [
    "ProvisionRequest",
    "TemplateFlavor",
    "TYPESCRIPT_TEMPLATES",
]
