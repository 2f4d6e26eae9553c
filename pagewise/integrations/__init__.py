"""Optional framework integrations. Import submodules directly."""
