"""services/ — business logic. Routers stay thin and call in here."""
