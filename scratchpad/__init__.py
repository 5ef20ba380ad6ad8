"""Small programs for learning: sorting, subset sum, a ray caster, TGA writing and more."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "dispatch",
    "option",
    "raytrace",
    "repl",
    "search",
    "sorting",
    "subsequence",
    "subsetsum",
    "tga",
    "tree",
]