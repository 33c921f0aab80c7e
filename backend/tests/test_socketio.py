def _events(sio_client, name):
    return [pkt for pkt in sio_client.get_received('/ws') if pkt['name'] == name]


def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    connected = _events(sio_client, 'connected')
    assert connected and connected[0]['args'][0]['state']['phase'] == 'idle'

    sio_client.emit('join_board', namespace='/ws')
    received = sio_client.get_received('/ws')
    names = [pkt['name'] for pkt in received]
    assert 'joined' in names
    assert 'state_update' in names


def test_state_updates_pushed_to_board(sio_client, client):
    sio_client.emit('join_board', namespace='/ws')
    sio_client.get_received('/ws')  # flush

    state = client.post('/api/game/start').get_json()
    updates = _events(sio_client, 'state_update')
    assert updates
    assert updates[-1]['args'][0]['round_active'] is True

    client.post('/api/game/tap', json={'index': state['active_cell']})
    updates = _events(sio_client, 'state_update')
    assert updates[-1]['args'][0]['score'] == 1


def test_start_and_tap_over_socket(sio_client, session):
    sio_client.emit('join_board', namespace='/ws')
    sio_client.get_received('/ws')

    sio_client.emit('start', namespace='/ws')
    assert session.state.round_active is True
    sio_client.get_received('/ws')

    sio_client.emit('tap', {'index': session.state.active_cell}, namespace='/ws')
    results = _events(sio_client, 'tap_result')
    assert results[0]['args'][0]['hit'] is True
    assert session.state.score == 1


def test_invalid_tap_emits_error(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('tap', {'index': 'nope'}, namespace='/ws')
    errors = _events(sio_client, 'error')
    assert errors and 'index' in errors[0]['args'][0]['message']


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    pongs = _events(sio_client, 'pong')
    assert pongs[0]['args'][0] == {'n': 1}


def test_leave_board_stops_updates(sio_client, client):
    sio_client.emit('join_board', namespace='/ws')
    sio_client.emit('leave_board', namespace='/ws')
    sio_client.get_received('/ws')
    client.post('/api/game/start')
    assert _events(sio_client, 'state_update') == []
