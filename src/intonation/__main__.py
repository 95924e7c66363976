"""Allow running intonation with `python -m intonation`."""
from intonation.cli import main

main()
