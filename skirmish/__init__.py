"""
Skirmish package: the turn-resolution engine for a single combat encounter.

This package contains the battle orchestrator, the roster of combatants,
action selection and resolution, and the console components used to drive
an encounter from the command line.
"""
