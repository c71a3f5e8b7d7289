"""Allow running as ``python -m appveyor_evu``."""

from appveyor_evu.cli.main import app

app()
