def _register(client, username: str, role: str, password: str = 'pass123'):
    return client.post('/register', json={'username': username, 'password': password, 'role': role})


def test_root_reports_status(client) -> None:
    response = client.get('/')

    assert response.status_code == 200
    assert response.json() == {'status': 'Office Hours Booking API Running'}


def test_register_returns_created_user_without_password(client) -> None:
    response = _register(client, 'profP1', 'professor')

    assert response.status_code == 201
    body = response.json()
    assert body['username'] == 'profP1'
    assert body['role'] == 'professor'
    assert isinstance(body['id'], int)
    assert 'createdAt' in body
    assert 'password' not in body
    assert 'hashedPassword' not in body


def test_register_duplicate_username_returns_400(client) -> None:
    _register(client, 'studentA', 'student')

    response = _register(client, 'studentA', 'student')

    assert response.status_code == 400
    assert response.json() == {'detail': 'Username is already taken.'}


def test_register_invalid_role_returns_400(client) -> None:
    response = _register(client, 'someone', 'admin')

    assert response.status_code == 400


def test_register_missing_field_returns_400(client) -> None:
    response = client.post('/register', json={'username': 'someone', 'role': 'student'})

    assert response.status_code == 400
    assert isinstance(response.json()['detail'], list)


def test_login_returns_token(client) -> None:
    _register(client, 'studentA', 'student')

    response = client.post('/login', json={'username': 'studentA', 'password': 'pass123'})

    assert response.status_code == 200
    body = response.json()
    assert body['token']
    assert body['tokenType'] == 'bearer'


def test_login_unknown_user_returns_404(client) -> None:
    response = client.post('/login', json={'username': 'ghost', 'password': 'pass123'})

    assert response.status_code == 404
    assert response.json() == {'detail': 'User not found'}


def test_login_wrong_password_returns_401(client) -> None:
    _register(client, 'studentA', 'student')

    response = client.post('/login', json={'username': 'studentA', 'password': 'nope'})

    assert response.status_code == 401
    assert response.json() == {'detail': 'Invalid credentials'}


def test_register_role_must_match_exactly(client) -> None:
    response = _register(client, 'profP1', 'PROFESSOR')

    assert response.status_code == 400
