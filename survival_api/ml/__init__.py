"""Feature derivation and scoring.

- features.py: passenger records, numeric parsing, the feature schema
- noise.py: injectable score perturbation sources
- engine.py: the heuristic survival score and its breakdown
"""
