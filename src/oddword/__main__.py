# src/oddword/__main__.py
from oddword.cli import main

main()
