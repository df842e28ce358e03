"""Registrar: student records store with web and terminal front ends."""
