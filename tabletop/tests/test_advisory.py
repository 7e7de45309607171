"""
Tests for the advisory client.

The remote service is replaced with an httpx.MockTransport; every
malformed or failed answer must come back as "no recommendation".
"""

import json

import httpx
import pytest

from ..advisory import AdvisoryClient, AdviceUnavailable, BestActionRequest
from ..games.shut_the_box import create_game_state, toggle_tile


def _client(handler):
    return AdvisoryClient(
        base_url="http://advisor.test/shut-the-box",
        transport=httpx.MockTransport(handler),
    )


def _answer(payload, status_code=200):
    def handler(request):
        return httpx.Response(status_code, json=payload)
    return handler


class TestRequest:
    """Tests for what the client sends."""

    def test_request_body(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"action": [3]})

        state = toggle_tile(create_game_state(), 9)
        _client(handler).fetch_best_action(state)

        assert seen["method"] == "POST"
        assert seen["path"] == "/shut-the-box/find-best-action"
        assert seen["body"] == {
            "dice_value": 3,
            "tiles_open": [True] * 8 + [False],
        }

    def test_request_model(self):
        request = BestActionRequest.from_state(create_game_state())

        assert request.dice_value == 3
        assert len(request.tiles_open) == 9


class TestResponses:
    """Tests for how answers are interpreted."""

    def test_recommendation(self):
        client = _client(_answer({"action": [1, 2]}))

        assert client.fetch_best_action(create_game_state()) == [1, 2]
        assert client.find_best_action(create_game_state()) == [1, 2]

    def test_no_legal_move(self):
        """A null action means the service found no move."""
        client = _client(_answer({"action": None}))

        assert client.fetch_best_action(create_game_state()) is None

    @pytest.mark.parametrize("payload", [
        {},
        {"action": 3},
        {"action": ["3"]},
        {"action": [10]},
        {"action": [0]},
        {"action": [True]},
        [1, 2],
    ])
    def test_malformed_answers(self, payload):
        client = _client(_answer(payload))

        with pytest.raises(AdviceUnavailable):
            client.fetch_best_action(create_game_state())
        assert client.find_best_action(create_game_state()) is None

    def test_error_status(self):
        client = _client(_answer({"action": [3]}, status_code=500))

        with pytest.raises(AdviceUnavailable):
            client.fetch_best_action(create_game_state())

    def test_not_json(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(AdviceUnavailable):
            client.fetch_best_action(create_game_state())

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)

        with pytest.raises(AdviceUnavailable):
            client.fetch_best_action(create_game_state())
        assert client.find_best_action(create_game_state()) is None

    def test_failure_is_logged(self, caplog):
        client = _client(_answer({}, status_code=503))

        with caplog.at_level("WARNING"):
            client.find_best_action(create_game_state())

        assert "No recommendation" in caplog.text
