"""Reflex configuration for the Sirene UI application."""

import reflex as rx

config = rx.Config(
    app_name="sirene_ui",
    # Use the src directory structure
    app_module_import="sirene_ui.app",
)
