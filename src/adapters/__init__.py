"""Adaptadores hacia el sistema operativo (procesos, PowerShell, UAC)."""
