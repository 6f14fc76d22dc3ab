"""
Combat system module for the Skirmish battle engine.

This module handles the encounter itself: the roster of combatants, turn
ordering, action selection, action resolution and the round loop.
"""
