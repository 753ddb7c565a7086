"""Adaptadores: fuentes de aleatoriedad y salida del secreto."""
