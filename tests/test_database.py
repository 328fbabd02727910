from app.core.database import DOCUMENT_MODELS, DatabaseManager, collection_names


def test_every_collection_is_registered():
    assert collection_names(DOCUMENT_MODELS) == [
        "users",
        "flights",
        "cars",
        "tours",
        "transportation",
        "bookings",
    ]


async def test_status_without_client_is_disconnected():
    assert await DatabaseManager.ping() is False
    assert await DatabaseManager.status() == "disconnected"
