"""Rich-based Terminal UI for the Asset Tracker.

Modules:
- app.py: Input loop and session orchestration
- display.py: Rich renderables for the report table and panels
- renderer.py: Formatting utilities
- input_handler.py: Prompt helpers with re-prompt validation
- config.py: TUI styles and constants
"""

__all__ = [
    "app",
    "display",
    "renderer",
    "input_handler",
    "config",
]
