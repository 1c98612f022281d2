"""Tool configuration — CLI settings and logging setup."""
