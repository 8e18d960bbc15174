"""ifacegen - Go interface stub and mock generator."""

__version__ = "0.1.0"

from ifacegen.domain.model.configuration import GeneratorConfig
from ifacegen.presentation.api import generate

__all__ = ["GeneratorConfig", "__version__", "generate"]
