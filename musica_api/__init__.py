"""Music catalog and playlist API with JWT auth and an Admin role."""
