"""Per-frame background style resolution."""

from .common import BufferSizeError
from .surface import SurfaceBackgroundResolver
from .underground import UgBackgroundResolver

__all__ = ["BufferSizeError", "SurfaceBackgroundResolver", "UgBackgroundResolver"]
