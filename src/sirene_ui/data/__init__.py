"""
Static demo data for the Sirene UI.

This package contains fixture payloads used by DemoSireneService for
development and demonstrations without network access.

Modules:
- demo_payloads: Géoplateforme, BAN and SIRENE response bodies
"""
