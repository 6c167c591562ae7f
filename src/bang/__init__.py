__version__ = "0.1.0"

__all__ = [
    "__version__",
    "apply",
    "cli",
    "core",
    "errors",
    "exit_codes",
    "manifest",
    "shebang",
]
