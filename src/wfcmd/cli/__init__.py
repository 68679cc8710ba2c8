"""wfcmd command-line interface.

``cli`` and ``main`` are resolved on first access, so importing the library
(``from wfcmd import Action``) never loads click commands, and
``python -m wfcmd.cli.main`` runs without the module already imported.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(name)
