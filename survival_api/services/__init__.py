"""Application services.

- survival: validation, scoring and what-if analysis behind one async call
"""
