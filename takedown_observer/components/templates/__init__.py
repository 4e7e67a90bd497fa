"""
Templates component - page fragments with literal placeholder substitution.
"""

from .component import TemplateCache, fill
from .models import TEMPLATE_NAMES, TemplateName, template_path

__all__ = [
    "TemplateCache",
    "fill",
    "TEMPLATE_NAMES",
    "TemplateName",
    "template_path",
]
