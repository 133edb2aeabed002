"""Pack icon folders into sprite sheets and generate SCSS/TypeScript bindings."""

from .coordinator import SpriteGenerator
from .errors import ClassificationError, OptionsError, PackingError, SpriteError, ValidationError
from .options import CssClasses, Options, SpriteGroupSpec, TargetFolder, load_options, validate_options

__all__ = [
    "SpriteGenerator",
    "ClassificationError",
    "OptionsError",
    "PackingError",
    "SpriteError",
    "ValidationError",
    "CssClasses",
    "Options",
    "SpriteGroupSpec",
    "TargetFolder",
    "load_options",
    "validate_options",
]
