from . import amenities, rooms_size, site, structure

__all__ = ["amenities", "rooms_size", "site", "structure"]
