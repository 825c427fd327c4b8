"""Gem Runner: tile-based side-scrolling platformer."""
