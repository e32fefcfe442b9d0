"""
pumlhelper package – sorts and rotates PlantUML diagram source.

Responsibilities are split as follows:
 - Text model of a diagram (arrows, lines, definitions, blocks) in models/*
 - Diagram type detection in diagramtype.py
 - Diagram-type-specific sorting in handlers/*
 - Registry/decorator for handler lookup in handler_registry.py
 - Entry points auto_format_text in reformat.py and rotate_line in rotate.py
 - Output text builder in renderer.py
 - CLI wiring in cli.py, main orchestration in main.py
"""
__all__ = [
    "cli",
    "config",
    "diagramtype",
    "errors",
    "handler_registry",
    "handlers",
    "main",
    "models",
    "reformat",
    "renderer",
    "rotate",
    "utils",
]
