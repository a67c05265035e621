"""Configuração do cliente: logging estruturado e settings."""
