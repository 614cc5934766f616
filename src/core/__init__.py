"""Core: dominio, contratos y servicios. No depende de la CLI."""
