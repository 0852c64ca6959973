from buyer_registry.models.home import Home

HOMES = [
    Home(
        id="home-100",
        owner_id="seller-123",
        type="townhouse",
        beds=3,
        baths=2,
        feature_summary="Three-level end unit with EV-ready parking and a private rooftop terrace.",
        photos=[
            {"id": "home-100-photo-1", "cdn_url": "https://cdn.example.com/homes/home-100/1.jpg"},
            {"id": "home-100-photo-2", "cdn_url": "https://cdn.example.com/homes/home-100/2.jpg"},
        ],
        full_address="123 Seaview Drive, Port Moody, BC",
        neighbourhood="Seaview",
        city="Port Moody",
    ),
    Home(
        id="home-210",
        owner_id="seller-456",
        type="condo",
        beds=2,
        baths=2,
        feature_summary="Waterfront outlook with flex office and concierge amenities.",
        photos=[
            {"id": "home-210-photo-1", "cdn_url": "https://cdn.example.com/homes/home-210/1.jpg"},
        ],
        full_address="1702 Aquarius Villas, Vancouver, BC",
        neighbourhood="Yaletown",
        city="Vancouver",
    ),
]
