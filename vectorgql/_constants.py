ADDITIONAL_FIELD = "_additional"

GENERATE_SINGLE_RESULT = "singleResult"
GENERATE_GROUPED_RESULT = "groupedResult"
GENERATE_ERROR = "error"

BEACON_SCHEME = "weaviate"
BEACON_DEFAULT_HOST = "localhost"


def _get_beacon(class_name: str, id: str, host: str = BEACON_DEFAULT_HOST) -> str:
    """Get the beacon pointing at a single object."""
    return f"{BEACON_SCHEME}://{host}/{class_name}/{id}"
