import pytest

from search_server.document import DocumentStatus
from search_server.search_server import SearchServer


@pytest.fixture
def pets_server() -> SearchServer:
    server = SearchServer("and in on")
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "groomed starling eugene", DocumentStatus.BANNED, [9])
    return server


@pytest.fixture
def station_server() -> SearchServer:
    server = SearchServer("is are was a an in the with near at")
    server.add_document(
        0, "a grey hound with black ears is found at the railway station", DocumentStatus.ACTUAL, [1, 3, 2]
    )
    server.add_document(2, "white red suare long", DocumentStatus.ACTUAL, [3])
    server.add_document(
        3, "a white cat with long furry tail is found near the red square", DocumentStatus.ACTUAL, [1, 2]
    )
    return server
