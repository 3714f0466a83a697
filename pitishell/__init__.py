"""Shell building blocks: environment, syntax checks, expansion, builtins and command lookup."""

__version__ = "0.1.0"