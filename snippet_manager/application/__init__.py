"""Application layer: use-case services and the saga they run on."""
