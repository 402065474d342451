"""Tests for app.py and routes/grading.py — JSON API."""


def test_healthz(client):
    resp = client.get('/healthz')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'ok'}


def test_get_quiz(client, quiz_doc):
    resp = client.get('/api/quiz')
    assert resp.status_code == 200
    assert resp.get_json()['meta']['title'] == quiz_doc['meta']['title']


def test_check_fillin(client):
    resp = client.post('/api/fillins/f3/check', json={'value': '北京时间'})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['is_correct'] is True
    assert body['answer_hint'] == 'Accepted: utc+8, 北京时间'


def test_check_fillin_numeric_value(client):
    resp = client.post('/api/fillins/f1/check', json={'value': 29.532})
    assert resp.get_json()['is_correct'] is True


def test_check_fillin_blank(client):
    resp = client.post('/api/fillins/f1/check', json={})
    assert resp.status_code == 200
    assert resp.get_json()['is_correct'] is False


def test_check_unknown_fillin(client):
    resp = client.post('/api/fillins/nope/check', json={'value': 'x'})
    assert resp.status_code == 404
    assert 'nope' in resp.get_json()['error']


def test_check_fillin_bad_body(client):
    resp = client.post('/api/fillins/f1/check', data='not json',
                       content_type='text/plain')
    assert resp.status_code == 400


def test_submit(client):
    resp = client.post('/api/submit', json={
        'mcq': {'m1': 1, 'm2': 0},
        'fillins': {'f1': '２９.５３１', 'f5': 'D22'},
    })
    assert resp.status_code == 200
    summary = resp.get_json()['summary']
    assert summary['mcq']['correct_ids'] == ['m1']
    assert summary['mcq']['incorrect_ids'] == ['m2']
    assert summary['fillins']['correct_ids'] == ['f1']
    assert summary['fillins']['incorrect_ids'] == ['f5']
    assert summary['total_score'] == 4
    assert summary['total_possible'] == 13


def test_submit_rejects_non_object(client):
    resp = client.post('/api/submit', json=[1, 2])
    assert resp.status_code == 400
    resp = client.post('/api/submit', json={'mcq': [1]})
    assert resp.status_code == 400


def test_unknown_route_is_404(client):
    resp = client.get('/api/does-not-exist')
    assert resp.status_code == 404


def test_error_handler_hides_details(app):
    """Error handler should NOT leak exception details to user."""
    @app.route('/test-500')
    def crash():
        raise ValueError('secret answer key is 2034-02-19')

    with app.test_client() as c:
        resp = c.get('/test-500')
        assert resp.status_code == 500
        body = resp.data.decode()
        assert 'secret answer key' not in body
        assert 'Internal Server Error' in body


def test_submit_huge_integer_answers(client):
    huge = 10 ** 400
    resp = client.post('/api/submit', json={
        'mcq': {'m1': huge},
        'fillins': {'f1': huge},
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['mcq_results']['m1'] is False
    assert body['fillin_results']['f1'] is False
    assert body['summary']['mcq']['incorrect_ids'] == ['m1']
    assert body['summary']['fillins']['incorrect_ids'] == ['f1']


def test_submit_blank_choice_not_incorrect(client):
    resp = client.post('/api/submit', json={'mcq': {'m1': ''}, 'fillins': {}})
    assert resp.status_code == 200
    assert resp.get_json()['summary']['mcq']['incorrect_ids'] == []
