"""Capa CLI (Typer + Rich): prompts, flags y render del reporte."""
