"""
User interface module for the Skirmish battle engine.

This module provides the choice prompts shown to the player and the sinks
that receive the result lines of an encounter.
"""
