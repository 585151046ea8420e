from wordscramble.services import get_game_service


def _events(sio_client, name):
    return [msg['args'][0] for msg in sio_client.get_received() if msg['name'] == name]


def _start(sio_client):
    sio_client.emit('start_round', {})
    rounds = _events(sio_client, 'round_state')
    assert len(rounds) == 1
    return rounds[0]['game_id']


def test_start_round_sends_state(sio_client):
    assert sio_client.is_connected()
    sio_client.emit('start_round', {})
    payload = _events(sio_client, 'round_state')[0]
    assert payload['success'] is True
    assert payload['state']['root_word'] == 'teacup'


def test_submit_word_accepted_and_rejected(sio_client):
    game_id = _start(sio_client)

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'cup'})
    accepted = _events(sio_client, 'word_accepted')
    assert accepted[0]['result']['score_delta'] == 3

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'cup'})
    rejected = _events(sio_client, 'word_rejected')
    assert rejected[0]['result']['reason'] == 'AlreadyUsed'
    assert rejected[0]['result']['title'] == 'Word used already'
    assert rejected[0]['state']['total_score'] == 3


def test_restart_round(sio_client):
    game_id = _start(sio_client)
    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'cape'})
    sio_client.get_received()

    sio_client.emit('restart_round', {'game_id': game_id})
    state = _events(sio_client, 'round_state')[0]['state']
    assert state['round_number'] == 2
    assert state['total_score'] == 4


def test_missing_game_id_is_an_error(sio_client):
    sio_client.emit('submit_word', {'word': 'cup'})
    errors = _events(sio_client, 'error')
    assert errors == [{'error': 'Game ID is required'}]


def test_unknown_game_is_an_error(sio_client):
    sio_client.emit('restart_round', {'game_id': 'nope'})
    errors = _events(sio_client, 'error')
    assert errors[0]['error'] == 'Game not found'


def test_submit_after_empty_pool_restart_is_an_error(sio_client):
    game_id = _start(sio_client)
    get_game_service().word_pool = []

    sio_client.emit('restart_round', {'game_id': game_id})
    assert _events(sio_client, 'error')[0]['error_type'] == 'EmptyWordPool'

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'cup'})
    errors = _events(sio_client, 'error')
    assert errors[0]['error_type'] == 'RoundNotStarted'
    assert errors[0]['game_id'] == game_id


def test_game_removed_during_submit_is_an_error(sio_client, monkeypatch):
    game_id = _start(sio_client)
    monkeypatch.setattr(get_game_service(), 'submit_word', lambda game_id, word: None)

    sio_client.emit('submit_word', {'game_id': game_id, 'word': 'cup'})
    assert _events(sio_client, 'error') == [{'error': 'Game not found', 'game_id': game_id}]
