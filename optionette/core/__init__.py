"""Core Optional container and combinators."""
