"""Modelos de domínio da agenda (objetos de valor da sessão de visualização)."""
