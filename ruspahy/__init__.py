"""SPH simulation of elastoplastic solids with TOML configuration and VTK output."""

__version__ = "0.1.0"