"""
mdregistry - effective metadata registry resolution

Combines the bundled metadata registry with project-level presets and
customizations declared in sfdx-project.json.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
