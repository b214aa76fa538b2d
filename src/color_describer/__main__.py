# src/color_describer/__main__.py
from .cli import run

run()
