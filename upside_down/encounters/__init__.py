"""
Encounter module for the Upside Down RPG.

This module decides, every turn, which random event happens (battle, treasure,
healing fountain, trap or story) and applies its consequences.
"""

from .generator import EncounterGenerator, generate_event
from .outcomes import EventOutcome

__all__ = [
    # Import from generator.py
    "EncounterGenerator",
    "generate_event",
    # Import from outcomes.py
    "EventOutcome",
]
