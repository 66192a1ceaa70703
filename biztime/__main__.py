"""Run the API with ``python -m biztime``."""
from biztime.main import run

run()
