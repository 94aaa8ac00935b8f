# This package holds the HTTP layer: configuration, routing, guards, services, and schemas.
# Routers stay thin and delegate validation and store access to the service classes.
