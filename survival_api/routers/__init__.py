"""Route groups for the Titanic Survival API.

This module collects logically-related endpoints:
- health: service status and model identity
- misc: UI support endpoints (form options, model description)
- predict: survival prediction and what-if analysis
"""
