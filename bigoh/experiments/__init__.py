"""Experiment package for batch complexity studies.

Provides utilities to generate run configurations, execute them, and persist and summarise results.
"""
