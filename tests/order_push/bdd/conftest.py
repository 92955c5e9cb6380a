"""Shared BDD fixtures and step definitions for push notifications."""

from order_push.gateway import get_push_gateway
from order_push.registry.device_token import DeviceToken, TokenRole
from protean import current_domain
from pytest_bdd import given, parsers, then


def _register(token, user_id, role: TokenRole):
    current_domain.repository_for(DeviceToken).add(DeviceToken(token=token, user_id=user_id, role=role.value))


# ---------------------------------------------------------------------------
# Given steps: registered devices
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a client "{user_id}" with device token "{token}"'))
def client_device(user_id, token):
    _register(token, user_id, TokenRole.CLIENT)


@given(parsers.cfparse('a courier "{user_id}" with device token "{token}"'))
def courier_device(user_id, token):
    _register(token, user_id, TokenRole.COURIER)


@given(parsers.cfparse('the device "{token}" is no longer valid'))
def invalid_device(token):
    get_push_gateway().fail_token(token)


# ---------------------------------------------------------------------------
# Then steps: gateway assertions
# ---------------------------------------------------------------------------
@then(parsers.cfparse('{count:d} push is sent to "{token}"'))
@then(parsers.cfparse('{count:d} pushes are sent to "{token}"'))
def pushes_sent_to(count, token):
    assert len(get_push_gateway().sent_to(token)) == count


@then(parsers.cfparse('the push to "{token}" mentions "{text}"'))
def push_mentions(token, text):
    pushes = get_push_gateway().sent_to(token)
    assert any(text in p["notification"]["body"] for p in pushes)


@then("no push is sent")
def no_push_sent():
    assert get_push_gateway().attempts == []
