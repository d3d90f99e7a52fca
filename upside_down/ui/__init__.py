"""
User interface module for the Upside Down RPG.

This module provides the console interface: menus, prompts and the
storyteller's prose.
"""
