"""Process-level services (telemetry) shared by the keymap layers."""
