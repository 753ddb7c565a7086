"""Servicios del Core: resolución de opciones y generadores."""
