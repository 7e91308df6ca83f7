"""Infrastructure layer: database, repositories, storage and telemetry."""
