"""Pure projection engine: no I/O, no Flask."""
