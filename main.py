"""Salvo console entry point (``python main.py``)."""

from __future__ import annotations

import sys

from src.salvo.main import main

if __name__ == "__main__":
    sys.exit(main())
