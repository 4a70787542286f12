"""Camada de aplicação: fachada de operações da API."""
