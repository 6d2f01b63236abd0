"""Servicios del Core: privilegios, selección de adaptadores y operaciones DNS."""
