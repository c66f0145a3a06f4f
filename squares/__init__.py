"""
Squares Solver

Finds a sequence of color triggers that clears a colored-squares puzzle.

Packages:
    - squares.solver: level model, move simulation, heuristics, search
    - squares.loader: JSON/YAML level files

Modules:
    - squares.settings: persistent solver preferences
    - squares.report: text report of a search result
    - squares.render: ASCII board rendering
    - squares.debug: annotated board images
"""

__version__ = "0.1.0"
