"""Zasoby danych pakietu (tabela sygnatur)."""
