"""NPCForge: D&D 2024 NPC generator backed by a local Ollama model."""

__version__ = "0.2.0"
