"""rmguard - safe removal of package-managed paths.

Decides whether an installed path (package directory, symlink or command
shim) may be removed without touching data outside the managed tree.
"""

__version__ = "0.1.0"
