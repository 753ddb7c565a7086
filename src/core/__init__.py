"""Core: dominio, contratos y servicios de generación."""
