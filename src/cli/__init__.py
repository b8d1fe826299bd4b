"""Capa CLI (Typer + Rich): comandos, prompts y presentación."""
