from buyer_registry.models.home import Home


def project_home(home: Home, scope: dict) -> dict:
    """Reduce a home to the fields the resolved scope authorizes.

    Structural fields are always present. Without the address flag the
    address collapses to its neighbourhood and city.
    """
    payload = {
        "id": home.id,
        "type": home.type,
        "beds": home.beds,
        "baths": home.baths,
    }
    if scope.get("profile"):
        payload["featureSummary"] = home.feature_summary
    payload["photos"] = (
        [{"id": photo.id, "url": photo.cdn_url} for photo in home.photos]
        if scope.get("photos")
        else []
    )
    if scope.get("address"):
        payload["address"] = home.full_address
    else:
        payload["address"] = {"area": home.neighbourhood, "city": home.city}
    return payload
