"""Prompt construction for NPCForge."""
