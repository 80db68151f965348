"""Configuration package for the RPS arena.

Constants live in small themed modules (display, simulation); the
dataclasses in ``simulation_config`` bundle them for runtime use.
"""
