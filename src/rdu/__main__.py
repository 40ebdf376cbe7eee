"""Allow running as ``python -m rdu``."""

from rdu.cli import app

app(prog_name="rdu")
