import pytest

from betfront.app import load_completed_bets
from betfront.auth.token_store import InMemoryTokenStore, TokenPair
from betfront.clients.base import APIException
from betfront.clients.bets_client import CompletedBetsClient


def test_load_completed_bets_uses_stored_token(fake_http):
    store = InMemoryTokenStore()
    store.save(TokenPair(access="a1", refresh="r1"))
    fake_http.respond(200, [{"id": 1}])

    bets = load_completed_bets(store, CompletedBetsClient("http://bets.test/completed"))

    assert bets == [{"id": 1}]
    assert fake_http.calls[0]["headers"]["Authorization"] == "Bearer a1"


def test_load_completed_bets_rejected(fake_http):
    fake_http.respond(401, {"message": "Token expired"})
    with pytest.raises(APIException, match="Token expired"):
        load_completed_bets(InMemoryTokenStore(), CompletedBetsClient("http://bets.test/completed"))
