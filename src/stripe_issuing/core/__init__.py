"""Core of the client: configuration, errors, domain values and the request pipeline."""
