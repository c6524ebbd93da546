from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_subscription_reconciler
from api.main import app
from domain.exceptions.subscription import (
    ConfigurationError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from domain.models.subscription import Disposition


@pytest.fixture
def mock_reconciler():
    mock_service = MagicMock()
    mock_service.reconcile = AsyncMock(return_value=Disposition.CREATED)
    return mock_service


@pytest.fixture
def client(mock_reconciler):
    app.dependency_overrides[get_subscription_reconciler] = lambda: mock_reconciler
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def subscribe_payload(**overrides):
    payload = {
        'email': 'user@x.com',
        'settlementId': 'tagA',
        'settlementName': 'Settlement A',
        'deadline': '2026-12-31',
    }
    payload.update(overrides)
    return payload


def test_subscribe_created(client, mock_reconciler):
    response = client.post('/api/subscribe', json=subscribe_payload())

    assert response.status_code == 200
    assert response.json() == {
        'success': True,
        'message': "Successfully subscribed! You'll receive a reminder before the deadline.",
    }
    mock_reconciler.reconcile.assert_awaited_once_with(
        email='user@x.com', tag='tagA', name='Settlement A', deadline='2026-12-31'
    )


def test_subscribe_updated(client, mock_reconciler):
    mock_reconciler.reconcile.return_value = Disposition.UPDATED

    response = client.post('/api/subscribe', json=subscribe_payload())

    assert response.status_code == 200
    assert response.json()['message'] == 'Settlement added to your subscriptions!'


def test_subscribe_deadline_optional(client, mock_reconciler):
    payload = subscribe_payload()
    del payload['deadline']

    response = client.post('/api/subscribe', json=payload)

    assert response.status_code == 200
    assert mock_reconciler.reconcile.call_args.kwargs['deadline'] is None


def test_subscribe_validation_error_is_400(client, mock_reconciler):
    mock_reconciler.reconcile.side_effect = ValidationError('Invalid email address')

    response = client.post('/api/subscribe', json=subscribe_payload(email='nope'))

    assert response.status_code == 400
    assert response.json() == {'error': 'Invalid email address'}


def test_subscribe_empty_body_reaches_validation(client, mock_reconciler):
    mock_reconciler.reconcile.side_effect = ValidationError('Invalid email address')

    response = client.post('/api/subscribe')

    assert response.status_code == 400
    mock_reconciler.reconcile.assert_awaited_once_with(
        email=None, tag=None, name=None, deadline=None
    )


def test_subscribe_configuration_error_is_500(client, mock_reconciler):
    mock_reconciler.reconcile.side_effect = ConfigurationError('BUTTONDOWN_API_KEY is not set')

    response = client.post('/api/subscribe', json=subscribe_payload())

    assert response.status_code == 500
    assert response.json() == {'error': 'Subscription service is not configured'}


def test_subscribe_not_found_is_500(client, mock_reconciler):
    mock_reconciler.reconcile.side_effect = NotFoundError('Subscriber user@x.com not found')

    response = client.post('/api/subscribe', json=subscribe_payload())

    assert response.status_code == 500
    assert 'not found' in response.json()['error']


def test_subscribe_upstream_error_is_500_with_message(client, mock_reconciler):
    mock_reconciler.reconcile.side_effect = UpstreamError('email_blocked')

    response = client.post('/api/subscribe', json=subscribe_payload())

    assert response.status_code == 500
    assert response.json() == {'error': 'email_blocked'}


def test_subscribe_get_not_allowed(client):
    response = client.get('/api/subscribe')
    assert response.status_code == 405
