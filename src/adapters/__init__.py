"""Adaptadores de I/O (HTTP hacia el servicio QRNG)."""
