import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def order_push_bed():
    from order_push.domain import order_push

    bed = DomainFixture(order_push)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(order_push_bed):
    from order_push.gateway import reset_push_gateway
    from order_push.registry import reset_token_registry

    reset_push_gateway()
    reset_token_registry()

    with order_push_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

    reset_push_gateway()
    reset_token_registry()
