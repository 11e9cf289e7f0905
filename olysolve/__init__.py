"""Solvers for olympiad-style algorithmic problems, one module per problem."""

__version__ = "0.1.0"