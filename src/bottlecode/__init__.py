"""Color Bottle Puzzle engine.

The package is organised the same way a small ECS game is:
- components/: dataclass state attached to the session entity
- systems/: event-bus subscribers that mutate components
- utils/: pure helpers (answer generation, grading, invariants)
- ui/: layout geometry and hit-testing shared by input and rendering
- session.py: the in-process API consumed by a presentation layer
"""
