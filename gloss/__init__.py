"""
GLOSS - Glossary Lookup Overlay for Static Sites

Build-time terminology annotation for static content sites. Consumes rendered
page fragments and a hand-authored glossary, and injects CSS-only tooltips on
the first occurrence of each glossary term.

Architecture:
- Glossary Context: Term records, dictionary loading and lookup
- Annotation Context: Match index, tree walking, span splitting
- Rendering Context: HTML fragment parsing, serialization and page builds
"""

__version__ = "0.1.0"
