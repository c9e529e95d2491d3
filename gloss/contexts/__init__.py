"""Bounded contexts of the GLOSS build pipeline."""
