"""
Fact Compliance — cross-source checks for published store facts.

Architecture: Normalize → Validate structure → Compare → Verdict (+ reason code)
Philosophy:  Two pages, one store. Decide equivalence, never correctness.
"""

__version__ = "1.0.0"
