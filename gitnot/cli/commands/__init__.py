# gitnot/cli/commands/__init__.py
"""One module per gitnot mode, each exposing command()."""
