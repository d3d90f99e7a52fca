"""
Upside Down RPG.

A single-player, turn-based text adventure: a hero fights the monsters of the
Upside Down, collects loot, and either defeats the Mind Flayer or dies. This
package contains the combat and encounter engine and its command-line
interface.
"""

__version__ = "1.0.0"
