"""Auto-import builtin tool modules to trigger @register_tool decorators."""
from . import search
from . import calculator
from . import weather
from . import currency
