"""Conectores HTTP da camada API."""
