"""Grid-occupying combatants that fire torpedoes at one another."""

__version__ = "0.1.0"
