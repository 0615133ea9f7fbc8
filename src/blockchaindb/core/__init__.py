"""Core: dominio, configuración y logging.

Por qué:
- El Core no conoce JSON crudo, ficheros ni CLI: solo conceptos del problema.
"""
