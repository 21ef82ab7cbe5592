"""Core: configuration, exception handlers, lifespan, rate limiter."""
