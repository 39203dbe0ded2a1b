"""Records Dashboard package: invoice and customer mutation pipeline.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
