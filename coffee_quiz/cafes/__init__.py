"""
Nearby cafe lookup.

Responsibilities:
- Geocode a city name to coordinates.
- Find cafes around a coordinate through a pluggable provider
  (OpenStreetMap by default, Google Places when a key is configured).
- Serve repeated searches from a read-through TTL cache.
"""
