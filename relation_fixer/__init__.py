"""Synthesize inherited and mixed JSDoc doclets from precomputed relations."""
