"""
Combat system module for the Upside Down RPG.

This module handles all combat mechanics including damage calculation and the
turn-based resolution of a battle between the player and one enemy.
"""
