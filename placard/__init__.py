"""Placard — procedural placeholder-image scene synthesis."""
