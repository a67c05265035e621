"""Implementações concretas de IO do cliente."""
