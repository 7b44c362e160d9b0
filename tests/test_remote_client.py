import unittest
from unittest import mock

import requests

from wordle_app.models import RemoteUnavailable
from wordle_app.services.remote_client import RemoteGameClient


def make_client(payload=None):
    session = mock.Mock()
    session.headers = {}
    response = mock.Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = payload if payload is not None else {}
    session.request.return_value = response
    client = RemoteGameClient('http://authority/api/', timeout=3.0, session=session)
    return client, session, response


class TestRemoteGameClient(unittest.TestCase):
    def test_start_game(self) -> None:
        client, session, _ = make_client({'gameId': 'g1'})
        self.assertEqual(client.start_game(), {'gameId': 'g1'})
        session.request.assert_called_once_with(
            'POST', 'http://authority/api/wordle/game', json=None, timeout=3.0
        )
        self.assertEqual(session.headers['Content-Type'], 'application/json')

    def test_submit_guess(self) -> None:
        client, session, _ = make_client({'gameOver': False})
        client.submit_guess('g1', 'CRATE')
        session.request.assert_called_once_with(
            'POST', 'http://authority/api/wordle/game/g1/guess', json={'guess': 'CRATE'}, timeout=3.0
        )

    def test_read_endpoints(self) -> None:
        client, session, _ = make_client({'A': 'correct'})
        client.get_key_statuses('g1')
        client.get_game_state('g1')
        urls = [c.args[1] for c in session.request.call_args_list]
        self.assertEqual(urls, ['http://authority/api/wordle/game/g1/key-statuses',
                                'http://authority/api/wordle/game/g1'])

    def test_connection_error(self) -> None:
        client, session, _ = make_client()
        session.request.side_effect = requests.ConnectionError('refused')
        with self.assertRaises(RemoteUnavailable):
            client.start_game()

    def test_timeout(self) -> None:
        client, session, _ = make_client()
        session.request.side_effect = requests.Timeout('slow')
        with self.assertRaises(RemoteUnavailable):
            client.submit_guess('g1', 'CRATE')

    def test_http_error_status(self) -> None:
        client, _, response = make_client()
        response.raise_for_status.side_effect = requests.HTTPError('500 Server Error')
        with self.assertRaises(RemoteUnavailable):
            client.start_game()

    def test_non_json_body(self) -> None:
        client, _, response = make_client()
        response.json.side_effect = ValueError('no json')
        with self.assertRaises(RemoteUnavailable):
            client.start_game()

    def test_non_object_body(self) -> None:
        client, _, response = make_client()
        response.json.return_value = ['not', 'an', 'object']
        with self.assertRaises(RemoteUnavailable):
            client.start_game()

    def test_success_false_body(self) -> None:
        client, _, _ = make_client({'success': False, 'error': 'Game not found'})
        with self.assertRaises(RemoteUnavailable):
            client.submit_guess('g1', 'CRATE')
