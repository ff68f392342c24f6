"""
Sirene UI: a Reflex application for checking the French SIRENE registry.

Type a French address, pick one of the Géoplateforme suggestions, and the
application resolves it through the BAN geocoder, then lists the active
employer establishments registered at that address in INSEE SIRENE.
A second page lists establishments by commune code.

Subpackages:
- api: Upstream HTTP clients returning OperationResult values
- components: Reflex UI components
- models: Data models and tagged session states
- services: Service layer (demo and live implementations)
- data: Demo fixture payloads

Main entry points:
- app.app: The Reflex application instance
- app.main(): Start the development server
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
