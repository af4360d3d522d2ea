"""
Entry point for running component_viewer as a module.

This file enables:
- `python -m component_viewer`
- `uv run python -m component_viewer`
"""

from __future__ import annotations

from component_viewer import main

if __name__ == "__main__":
    main()
