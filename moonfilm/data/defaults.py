"""
Default service catalog for a fresh studio database.
"""
from moonfilm.schemas import Service


def _svc(id, name, category, price, description):
    return Service(id=id, name=name, category=category, price=price, description=description, is_active=True)


DEFAULT_SERVICES: list[Service] = [
    # Photography
    _svc("1", "Wedding Photography", "photography", 50000, "Full day wedding coverage"),
    _svc("2", "Pre-Wedding Shoot", "photography", 30000, "Pre-wedding couple photoshoot"),
    _svc("3", "Portrait Session", "photography", 10000, "1-2 hour portrait session"),
    _svc("4", "Product Photography", "photography", 6000, "Per product (5 photos)"),
    _svc("5", "Event Photography", "photography", 20000, "Corporate/Private events"),
    _svc("6", "Maternity Shoot", "photography", 15000, "Maternity photoshoot session"),
    # Videography
    _svc("7", "Wedding Film", "videography", 70000, "Full wedding day coverage"),
    _svc("8", "Cinematic Trailer", "videography", 30000, "3-5 min highlight video"),
    _svc("9", "Event Videography", "videography", 40000, "Full event coverage"),
    _svc("10", "Commercial Video", "videography", 50000, "Brand/Product commercial"),
    _svc("11", "Drone Coverage", "videography", 15000, "Aerial videography addon"),
    # Packages
    _svc("12", "Wedding Complete Package", "package", 110000, "Photo + Video + Album"),
    _svc("13", "Pre-Wedding Package", "package", 50000, "Photo + Video + Prints"),
    _svc("14", "Event Complete Package", "package", 55000, "Photo + Video coverage"),
    # Add-ons
    _svc("15", "Extra Hour", "addon", 4000, "Additional coverage hour"),
    _svc("16", "Photo Album", "addon", 10000, "20 page premium album"),
    _svc("17", "USB Drive", "addon", 3000, "All files on USB"),
    _svc("18", "Express Delivery", "addon", 6000, "48 hour turnaround"),
    _svc("19", "Extra Photographer", "addon", 10000, "Additional photographer"),
    _svc("20", "Printed Photos (10)", "addon", 2000, "10 printed photos 8x10"),
]
