"""logpretty — turn JSON log lines into readable terminal output."""

from logpretty.errors import NestingTooDeepError, PrettyConfigError, PrettyError
from logpretty.formatter import pretty, render_fields, render_value
from logpretty.options import PrettyOptions, load_options, load_yaml_config

__all__ = [
    "NestingTooDeepError",
    "PrettyConfigError",
    "PrettyError",
    "PrettyOptions",
    "load_options",
    "load_yaml_config",
    "pretty",
    "render_fields",
    "render_value",
]
