"""Adaptadores: traducen entre JSON/ficheros y el dominio."""
