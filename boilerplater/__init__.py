"""
Boilerplater

Generate boilerplate files and directories from registered generators,
driven by CLI flags or interactive prompts.
"""

from .config import ConfigError, ToolkitConfig, load_config
from .core import Boilerplater
from .dispatcher import Dispatcher, normalize_cli_args
from .fileops import FileOps, UpdateReplacement
from .i18n import Localizer
from .messages import MessageOptions, Messenger
from .options import CheckboxOption, GeneratorEntry, ListOption, OptionKind, OptionSpec
from .paths import PathResolver, clean_name
from .prompt import PromptAdapter
from .registry import GeneratorRegistry, RegistryError
from .templates import TemplateEngine, TemplateError

__version__ = "0.1.0"

__all__ = [
    "Boilerplater",
    "ToolkitConfig",
    "ConfigError",
    "load_config",
    "GeneratorEntry",
    "OptionSpec",
    "OptionKind",
    "CheckboxOption",
    "ListOption",
    "GeneratorRegistry",
    "RegistryError",
    "Dispatcher",
    "normalize_cli_args",
    "PromptAdapter",
    "FileOps",
    "UpdateReplacement",
    "Localizer",
    "Messenger",
    "MessageOptions",
    "PathResolver",
    "clean_name",
    "TemplateEngine",
    "TemplateError",
]
