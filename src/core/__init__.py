"""Core: configuración, dominio y servicios puros (parser y diff)."""
