"""Servicios del Core (orquestación de los flujos lotto / random-array)."""
