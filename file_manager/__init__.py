"""file_manager package: interactive shell for navigating the local filesystem.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
