"""Camada de borda com a API SendWithUs: payloads e transporte HTTP."""
