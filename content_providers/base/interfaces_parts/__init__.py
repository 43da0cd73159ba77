"""Single-class interface modules re-exported by ``base.interfaces``."""

from .content_generator import ContentGenerator
from .has_default_model import HasDefaultModel

__all__ = ["ContentGenerator", "HasDefaultModel"]
