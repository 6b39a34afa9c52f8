"""Utilitários compartilhados entre camadas."""
