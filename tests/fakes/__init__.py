"""Fakes de serviços externos para testes."""
