"""Core orchestration, configuration and theming for nmprune."""
