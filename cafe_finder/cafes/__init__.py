"""
Café lookup engine.

Responsibilities:
- Hold the immutable city -> café registry.
- Validate incoming ``city`` / ``count`` / ``search`` query parameters.
- Filter a city's cafés by name substring and cap the result length.
- Serialise the result into the comma-separated wire format.
"""
