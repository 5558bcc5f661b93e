"""Run the API server: ``python -m src``."""

from src.main import run

run()
