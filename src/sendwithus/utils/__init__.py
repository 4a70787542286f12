"""Utilitários compartilhados do cliente SendWithUs."""
