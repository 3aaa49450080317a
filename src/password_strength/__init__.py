__all__ = (
    "exc",
    "Configuration",
    "PasswordStrength",
    "ValidationResult",
    "Preset",
    "PresetSpec",
    "PRESETS",
    "load_preset",
    "read_presets",
    "RuleDefinition",
    "RuleKind",
    "RULES",
)
__version__ = "0.1.0"

from . import exc
from .checker import PasswordStrength, ValidationResult
from .configuration import Configuration
from .preset import PRESETS, Preset, PresetSpec, load_preset, read_presets
from .rule import RULES, RuleDefinition, RuleKind
